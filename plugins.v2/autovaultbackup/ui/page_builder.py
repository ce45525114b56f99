"""页面构建器模块"""
from typing import Any, List, Dict
from ..backup.trigger import TriggerSource


class PageBuilder:
    """页面构建器类"""

    def __init__(self, plugin_instance):
        self.plugin = plugin_instance
        self.plugin_name = plugin_instance.plugin_name

    @staticmethod
    def _trigger_desc(value: str) -> str:
        try:
            return TriggerSource(value).desc
        except ValueError:
            return value or "N/A"

    def _build_history_row(self, item: Dict[str, Any]) -> dict:
        success = item.get('success', False)
        return {
            'component': 'tr',
            'content': [
                {'component': 'td', 'props': {'class': 'text-body-2'}, 'text': item.get('timestamp', 'N/A')},
                {'component': 'td', 'text': self._trigger_desc(item.get('trigger', ''))},
                {'component': 'td', 'content': [{
                    'component': 'VChip',
                    'props': {'color': 'success' if success else 'error', 'size': 'small', 'variant': 'flat'},
                    'text': '成功' if success else '失败'
                }]},
                {'component': 'td', 'text': item.get('filename') or '-'},
                {'component': 'td', 'text': str(item.get('entry_count', 0))},
            ]
        }

    def build_page(self) -> List[dict]:
        """构建备份历史页面"""
        history = self.plugin._history_manager.load_backup_history()

        if not history:
            return [
                {
                    'component': 'VAlert',
                    'props': {'type': 'info', 'variant': 'tonal', 'text': '暂无备份记录', 'class': 'mb-2'}
                }
            ]

        return [
            {
                'component': 'VCard',
                'props': {'variant': 'outlined', 'class': 'mb-4'},
                'content': [
                    {
                        'component': 'VCardTitle',
                        'props': {'class': 'text-h6'},
                        'text': f'📚 备份历史（最近 {len(history)} 次）'
                    },
                    {
                        'component': 'VCardText',
                        'content': [
                            {
                                'component': 'VTable',
                                'props': {'hover': True, 'density': 'compact'},
                                'content': [
                                    {
                                        'component': 'thead',
                                        'content': [
                                            {
                                                'component': 'tr',
                                                'content': [
                                                    {'component': 'th', 'text': '时间'},
                                                    {'component': 'th', 'text': '触发来源'},
                                                    {'component': 'th', 'text': '状态'},
                                                    {'component': 'th', 'text': '备份文件'},
                                                    {'component': 'th', 'text': '文件数'},
                                                ]
                                            }
                                        ]
                                    },
                                    {
                                        'component': 'tbody',
                                        'content': [self._build_history_row(item) for item in history]
                                    }
                                ]
                            }
                        ]
                    }
                ]
            }
        ]

"""
表单构建模块
负责构建插件设置面板
"""
from typing import Tuple, List, Dict, Any
from ..config.settings import DEFAULT_BACKUP_DIRNAME, DEFAULT_CONFIG, MAX_BACKUPS_LIMIT


class FormBuilder:
    """表单构建器类"""

    def __init__(self, plugin_instance):
        """
        初始化表单构建器
        :param plugin_instance: AutoVaultBackup插件实例
        """
        self.plugin = plugin_instance

    def build_form(self) -> Tuple[List[dict], Dict[str, Any]]:
        """构建配置表单"""
        default_backup_location_desc = f"插件数据目录下的 {DEFAULT_BACKUP_DIRNAME} 子目录"
        return [
            {
                'component': 'VForm',
                'content': [
                    {
                        'component': 'VCard',
                        'props': {'variant': 'outlined', 'class': 'mb-4'},
                        'content': [
                            {
                                'component': 'VCardTitle',
                                'props': {'class': 'text-h6'},
                                'text': '📦 备份设置'
                            },
                            {
                                'component': 'VCardText',
                                'content': [
                                    {
                                        'component': 'VRow',
                                        'content': [
                                            {'component': 'VCol', 'props': {'cols': 12}, 'content': [{'component': 'VTextField', 'props': {'model': 'backupDirectory', 'label': '备份目录', 'placeholder': f'留空则使用{default_backup_location_desc}', 'prepend-inner-icon': 'mdi-folder'}}]},
                                        ],
                                    },
                                    {
                                        'component': 'VRow',
                                        'content': [
                                            {'component': 'VCol', 'props': {'cols': 12, 'md': 4}, 'content': [{'component': 'VSwitch', 'props': {'model': 'backupOnClose', 'label': '关闭仓库时备份', 'color': 'primary', 'prepend-icon': 'mdi-logout'}}]},
                                            {'component': 'VCol', 'props': {'cols': 12, 'md': 4}, 'content': [{'component': 'VSwitch', 'props': {'model': 'backupOnOpen', 'label': '打开仓库时备份', 'hint': '备份上一次会话的内容', 'persistent-hint': True, 'color': 'primary', 'prepend-icon': 'mdi-login'}}]},
                                            {'component': 'VCol', 'props': {'cols': 12, 'md': 4}, 'content': [{'component': 'VSwitch', 'props': {'model': 'includeAttachments', 'label': '包含附件', 'hint': '备份图片、视频等非 Markdown 文件', 'persistent-hint': True, 'color': 'info', 'prepend-icon': 'mdi-paperclip'}}]},
                                        ],
                                    },
                                    {
                                        'component': 'VRow',
                                        'content': [
                                            {'component': 'VCol', 'props': {'cols': 12, 'md': 8}, 'content': [{'component': 'VSlider', 'props': {'model': 'maxBackups', 'label': '最大备份数量', 'hint': '0 表示不限制', 'persistent-hint': True, 'min': 0, 'max': MAX_BACKUPS_LIMIT, 'step': 1, 'thumb-label': True, 'prepend-icon': 'mdi-counter'}}]},
                                            {'component': 'VCol', 'props': {'cols': 12, 'md': 4}, 'content': [{'component': 'VCronField', 'props': {'model': 'cron', 'label': '定时备份周期', 'placeholder': '留空则不定时备份', 'prepend-inner-icon': 'mdi-clock-outline'}}]},
                                        ],
                                    },
                                ]
                            }
                        ]
                    },
                    {
                        'component': 'VAlert',
                        'props': {
                            'type': 'info',
                            'variant': 'tonal',
                            'class': 'mb-4',
                            'text': '手动备份：点击侧边栏的下载图标，或在命令面板中执行 "创建仓库备份"。'
                        }
                    }
                ]
            }
        ], dict(DEFAULT_CONFIG)

"""
备份历史模块
将每次备份结果记录到插件数据中，供历史页面和API读取
"""
from typing import Any, Dict, List
from ..host.log import logger

HISTORY_KEY = "backup_history"


class HistoryManager:
    """备份历史记录器"""

    def __init__(self, plugin_instance, max_history_entries: int = 100):
        self.plugin = plugin_instance
        self.plugin_name = plugin_instance.plugin_name
        self.max_history_entries = max_history_entries

    @staticmethod
    def to_entry(result) -> Dict[str, Any]:
        """BackupResult 转换为可持久化的历史条目"""
        return {
            "timestamp": result.finished_at.strftime('%Y-%m-%d %H:%M:%S'),
            "trigger": result.trigger.value,
            "success": result.success,
            "filename": result.filename,
            "entry_count": result.entry_count,
            "skipped": list(result.skipped_attachments),
            "message": result.message,
        }

    def load_backup_history(self) -> List[Dict[str, Any]]:
        """最近的备份记录，最新的在最前；格式不正确的条目会被丢弃"""
        history = self.plugin.get_data(HISTORY_KEY)
        if not isinstance(history, list):
            if history is not None:
                logger.error(f"{self.plugin_name} 备份历史格式不正确 (得到 {type(history)})，已忽略")
            return []
        return [item for item in history if isinstance(item, dict)]

    def save_backup_result(self, result):
        """记录一次备份结果，超出上限的旧记录被截断"""
        history = [self.to_entry(result)] + self.load_backup_history()
        try:
            self.plugin.save_data(HISTORY_KEY, history[:self.max_history_entries])
        except Exception as e:
            logger.error(f"{self.plugin_name} 保存备份历史失败: {e}")

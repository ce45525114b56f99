"""API处理模块"""
from typing import Any, Dict
from ..backup.trigger import TriggerSource


class APIHandler:
    """API处理器类"""
    
    def __init__(self, plugin_instance):
        """初始化API处理器"""
        self.plugin = plugin_instance
        self.plugin_name = plugin_instance.plugin_name
    
    def backup(self) -> Dict[str, Any]:
        """API备份接口"""
        result = self.plugin.run_backup_job(trigger=TriggerSource.MANUAL)
        if result is None:
            return {"success": False, "message": "已有备份任务正在执行"}
        return {"success": result.success, "message": result.message, "filename": result.filename}

    def history(self) -> Dict[str, Any]:
        """API备份历史接口"""
        return {"success": True, "data": self.plugin._history_manager.load_backup_history()}

"""
事件处理模块
处理宿主投递的命令事件
"""
from typing import Optional
from ..api.commands import BACKUP_ACTION, COMMAND_CATEGORY
from ..backup.trigger import TriggerSource
from ..host.event import Event, EventType
from ..host.log import logger


class VaultEventHandler:
    """仓库备份事件处理器类"""

    def __init__(self, plugin_instance):
        """
        初始化事件处理器
        :param plugin_instance: AutoVaultBackup插件实例
        """
        self.plugin = plugin_instance
        self.plugin_name = plugin_instance.plugin_name

    @staticmethod
    def _get_action(event_data: dict) -> str:
        action = event_data.get("action", "")
        if not action:
            data = event_data.get("data", {})
            if isinstance(data, dict):
                action = data.get("action", "")
        return action

    def handle_command(self, event: Optional[Event] = None) -> bool:
        """
        处理命令事件
        :return: 事件是否由本插件处理
        """
        if not event or event.event_type != EventType.PluginAction:
            return False
        event_data = event.event_data or {}

        category = event_data.get("category", "")
        if category and category != COMMAND_CATEGORY:
            return False
        action = self._get_action(event_data)
        if action != BACKUP_ACTION:
            return False

        logger.info(f"{self.plugin_name} 收到备份命令")
        self.plugin.run_backup_job(trigger=TriggerSource.MANUAL)
        return True

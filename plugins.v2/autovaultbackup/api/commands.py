"""
命令定义（命令面板与侧边栏图标）
将所有命令配置集中管理，便于维护
"""
from typing import List, Dict, Any
from ..backup.trigger import TriggerSource
from ..host.event import EventType
from ..host.log import logger

BACKUP_ACTION = "vault_backup"
COMMAND_CATEGORY = "仓库备份"


def get_plugin_commands() -> List[Dict[str, Any]]:
    """
    获取所有插件命令配置
        
    Returns:
        命令配置列表
    """
    commands = [
        {
            "id": "create-vault-backup",
            "cmd": "/vault_backup",
            "event": EventType.PluginAction,
            "desc": "创建仓库备份",
            "category": COMMAND_CATEGORY,
            "data": {
                "action": BACKUP_ACTION
            }
        }
    ]
    
    logger.debug(f"仓库自动备份 注册了 {len(commands)} 个命令")
    
    return commands


def get_ribbon_icons(plugin_instance) -> List[Dict[str, Any]]:
    """
    获取侧边栏图标配置

    Args:
        plugin_instance: 插件实例，用于绑定点击回调
    """
    return [
        {
            "icon": "download",
            "title": "创建仓库备份",
            "func": plugin_instance.run_backup_job,
            "kwargs": {"trigger": TriggerSource.MANUAL}
        }
    ]

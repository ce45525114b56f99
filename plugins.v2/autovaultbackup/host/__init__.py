"""
宿主接口模块
包含仓库文件访问、插件数据持久化、用户通知和事件定义
"""
from .event import Event, EventType
from .notice import LogNotifier, Notifier
from .plugin_base import HostContext, PluginBase
from .storage import JsonPluginStore, PluginStore
from .vault import LocalVault, Vault, VaultFile

__all__ = [
    'Event', 'EventType',
    'Notifier', 'LogNotifier',
    'HostContext', 'PluginBase',
    'PluginStore', 'JsonPluginStore',
    'Vault', 'VaultFile', 'LocalVault',
]

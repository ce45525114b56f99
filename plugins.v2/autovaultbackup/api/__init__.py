"""
API模块
包含命令、侧边栏图标和API路由定义
"""
from .commands import BACKUP_ACTION, get_plugin_commands, get_ribbon_icons
from .routes import get_api_routes

__all__ = ['BACKUP_ACTION', 'get_plugin_commands', 'get_ribbon_icons', 'get_api_routes']

"""
核心模块
包含命令事件处理
"""
from .event_handler import VaultEventHandler

__all__ = ['VaultEventHandler']

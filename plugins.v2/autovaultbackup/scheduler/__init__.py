"""
调度器模块
"""
from .manager import SchedulerManager, OPEN_BACKUP_DELAY_SECONDS

__all__ = ['SchedulerManager', 'OPEN_BACKUP_DELAY_SECONDS']

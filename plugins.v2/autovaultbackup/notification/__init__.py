"""
通知模块
"""
from .service import NotificationService, FAILURE_NOTICE, SUCCESS_NOTICE

__all__ = ['NotificationService', 'FAILURE_NOTICE', 'SUCCESS_NOTICE']

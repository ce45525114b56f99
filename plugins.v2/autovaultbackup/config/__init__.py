"""
配置管理模块
包含配置项定义、配置加载和配置管理
"""
from .loader import ConfigLoader
from .manager import ConfigManager
from .settings import BackupSettings, DEFAULT_BACKUP_DIRNAME, DEFAULT_CONFIG

__all__ = ['ConfigLoader', 'ConfigManager', 'BackupSettings', 'DEFAULT_BACKUP_DIRNAME', 'DEFAULT_CONFIG']

"""
备份模块
包含归档打包、备份执行和备份文件管理
"""
from .archive import ArchiveEntry, build_archive, build_backup_filename
from .backup_executor import BackupExecutor, BackupResult
from .backup_manager import BackupManager
from .trigger import TriggerSource

__all__ = [
    'ArchiveEntry', 'build_archive', 'build_backup_filename',
    'BackupExecutor', 'BackupResult', 'BackupManager', 'TriggerSource',
]

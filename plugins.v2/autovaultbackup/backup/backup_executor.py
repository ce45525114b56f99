"""
备份执行模块
负责执行备份任务的主要逻辑
"""
import threading
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from ..config.settings import BackupSettings, DEFAULT_BACKUP_DIRNAME
from ..host.log import logger
from .archive import build_archive, build_backup_filename, collect_attachments, collect_documents
from .backup_manager import BackupManager
from .trigger import TriggerSource


@dataclass
class BackupResult:
    """单次备份的结果"""
    success: bool
    trigger: TriggerSource
    filename: Optional[str] = None
    path: Optional[str] = None
    entry_count: int = 0
    skipped_attachments: List[str] = field(default_factory=list)
    message: str = ""
    finished_at: datetime = field(default_factory=datetime.now)


class BackupExecutor:
    """备份执行器类"""

    def __init__(self, plugin_instance):
        """
        初始化备份执行器
        :param plugin_instance: AutoVaultBackup插件实例
        """
        self.plugin = plugin_instance
        self.plugin_name = plugin_instance.plugin_name
        self.backup_manager = BackupManager(plugin_instance)

    def resolve_backup_dir(self, settings: BackupSettings) -> Path:
        """备份目录，未配置时使用插件数据目录下的 backups 子目录"""
        if settings.backup_directory:
            return Path(settings.backup_directory).expanduser()
        return self.plugin.get_data_path() / DEFAULT_BACKUP_DIRNAME

    def run_backup_job(self, trigger: TriggerSource = TriggerSource.MANUAL) -> Optional[BackupResult]:
        """执行备份任务，已有任务在执行时跳过本次触发"""
        if not self.plugin._lock:
            self.plugin._lock = threading.Lock()
        lock = self.plugin._lock
        if not lock.acquire(blocking=False):
            logger.info(f"{self.plugin_name} 已有备份任务正在执行，本次触发（{trigger.desc}）跳过！")
            return None

        try:
            self.plugin._running = True
            logger.info(f"开始执行 {self.plugin_name} 任务，触发来源: {trigger.desc}")
            result = self.create_backup(self.plugin._settings, trigger)
            self.plugin._history_manager.save_backup_result(result)
            return result
        finally:
            self.plugin._running = False
            lock.release()
            logger.debug(f"{self.plugin_name} 任务执行完成。")

    def create_backup(self, settings: BackupSettings, trigger: TriggerSource = TriggerSource.MANUAL,
                      now: Optional[datetime] = None) -> BackupResult:
        """
        创建一次仓库备份
        读取全部文档和（可选的）附件，打包写入备份目录，然后清理旧备份
        任何步骤出错都会中止备份并发送失败通知，单个附件读取失败除外
        """
        vault = self.plugin.vault
        try:
            backup_filename = build_backup_filename(vault.get_name(), now)
            backup_dir = self.resolve_backup_dir(settings)
            backup_dir.mkdir(parents=True, exist_ok=True)
            backup_path = backup_dir / backup_filename

            entries = collect_documents(vault)
            logger.info(f"{self.plugin_name} 已读取 {len(entries)} 个文档")

            skipped = []
            if settings.include_attachments:
                attachments, skipped = collect_attachments(vault, self.plugin_name)
                entries.extend(attachments)
                logger.info(f"{self.plugin_name} 已读取 {len(attachments)} 个附件，跳过 {len(skipped)} 个")

            backup_path.write_bytes(build_archive(entries))
        except Exception as e:
            logger.error(f"{self.plugin_name} 创建仓库备份失败: {e}")
            self.plugin._send_notification(success=False)
            return BackupResult(success=False, trigger=trigger, message=str(e))

        # 归档已写入，清理失败不影响备份结果
        self.backup_manager.cleanup_old_backups(backup_dir, settings.max_backups)

        logger.info(f"{self.plugin_name} 仓库备份已创建: {backup_path}")
        self.plugin._send_notification(success=True, filename=backup_filename)
        return BackupResult(
            success=True,
            trigger=trigger,
            filename=backup_filename,
            path=str(backup_path),
            entry_count=len(entries),
            skipped_attachments=skipped,
            message="备份成功",
        )

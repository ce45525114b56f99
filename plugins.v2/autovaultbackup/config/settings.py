"""
配置项定义模块
插件配置的默认值、类型转换以及持久化格式
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..host.log import logger

# 备份目录未配置时，在插件数据目录下使用的子目录名
DEFAULT_BACKUP_DIRNAME = "backups"

# 设置面板中最大备份数量滑块的范围
MAX_BACKUPS_LIMIT = 50

DEFAULT_CONFIG: Dict[str, Any] = {
    "backupDirectory": "",
    "includeAttachments": True,
    "maxBackups": 10,
    "backupOnClose": True,
    "backupOnOpen": False,
    "cron": "",
}


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


@dataclass(frozen=True)
class BackupSettings:
    """插件配置，备份过程中只读"""
    backup_directory: str = DEFAULT_CONFIG["backupDirectory"]
    include_attachments: bool = DEFAULT_CONFIG["includeAttachments"]
    max_backups: int = DEFAULT_CONFIG["maxBackups"]
    backup_on_close: bool = DEFAULT_CONFIG["backupOnClose"]
    backup_on_open: bool = DEFAULT_CONFIG["backupOnOpen"]
    cron: str = DEFAULT_CONFIG["cron"]

    @classmethod
    def from_dict(cls, saved_config: Optional[dict] = None) -> "BackupSettings":
        """合并默认值后转换为配置对象，缺失的字段使用默认值"""
        merged = {**DEFAULT_CONFIG, **(saved_config or {})}

        try:
            max_backups = int(merged["maxBackups"])
        except (TypeError, ValueError):
            logger.warning(f"最大备份数量配置无效: {merged['maxBackups']!r}，使用默认值 {DEFAULT_CONFIG['maxBackups']}")
            max_backups = DEFAULT_CONFIG["maxBackups"]

        return cls(
            backup_directory=str(merged["backupDirectory"] or "").strip(),
            include_attachments=_to_bool(merged["includeAttachments"]),
            max_backups=max(0, max_backups),
            backup_on_close=_to_bool(merged["backupOnClose"]),
            backup_on_open=_to_bool(merged["backupOnOpen"]),
            cron=str(merged["cron"] or "").strip(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """转换为持久化格式"""
        return {
            "backupDirectory": self.backup_directory,
            "includeAttachments": self.include_attachments,
            "maxBackups": self.max_backups,
            "backupOnClose": self.backup_on_close,
            "backupOnOpen": self.backup_on_open,
            "cron": self.cron,
        }

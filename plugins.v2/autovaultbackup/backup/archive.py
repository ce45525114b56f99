"""
归档模块
负责生成备份文件名、收集仓库文件并打包为 zip
"""
import io
import re
import zipfile
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Tuple, Union

import pytz

from ..host.log import logger
from ..host.vault import Vault, VaultFile

ARCHIVE_EXTENSION = ".zip"

# 这些扩展名的文件不作为附件备份
NON_ATTACHMENT_EXTENSIONS = ("md", "canvas")


@dataclass(frozen=True)
class ArchiveEntry:
    """归档条目，path 与仓库内的相对路径一致"""
    path: str
    content: Union[str, bytes]


def build_timestamp(now: Optional[datetime] = None) -> str:
    """
    生成文件名中使用的时间戳
    UTC 时间、精确到毫秒的 ISO 8601 格式，其中的 ':' 和 '.' 替换为 '-'
    例如 2024-05-01T10-20-30-123Z
    """
    if now is None:
        now = datetime.now(tz=pytz.utc)
    elif now.tzinfo is None:
        now = pytz.utc.localize(now)
    now = now.astimezone(pytz.utc)
    iso_time = f"{now.strftime('%Y-%m-%dT%H:%M:%S')}.{now.microsecond // 1000:03d}Z"
    return re.sub(r"[:.]", "-", iso_time)


def build_backup_filename(vault_name: str, now: Optional[datetime] = None) -> str:
    return f"{vault_name}_backup_{build_timestamp(now)}{ARCHIVE_EXTENSION}"


def is_attachment(file: VaultFile) -> bool:
    return not file.extension or file.extension not in NON_ATTACHMENT_EXTENSIONS


def collect_documents(vault: Vault) -> List[ArchiveEntry]:
    """读取仓库内所有文档，任何读取错误都会中断备份"""
    return [ArchiveEntry(file.path, vault.read(file)) for file in vault.get_markdown_files()]


def collect_attachments(vault: Vault, plugin_name: str = "") -> Tuple[List[ArchiveEntry], List[str]]:
    """
    逐个读取仓库内的附件
    单个附件读取失败只记录日志并跳过
    :return: (附件条目列表, 跳过的附件路径列表)
    """
    entries = []
    skipped = []
    for file in vault.get_files():
        if not is_attachment(file):
            continue
        try:
            entries.append(ArchiveEntry(file.path, vault.read_binary(file)))
        except Exception as e:
            logger.warning(f"{plugin_name} 添加附件 {file.path} 失败，已跳过: {e}")
            skipped.append(file.path)
    return entries, skipped


def build_archive(entries: Iterable[ArchiveEntry]) -> bytes:
    """在内存中打包所有条目，返回 zip 文件内容"""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zipf:
        for entry in entries:
            zipf.writestr(entry.path, entry.content)
    return buffer.getvalue()

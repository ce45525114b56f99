"""
备份管理模块
负责备份文件的清理和管理
"""
from pathlib import Path
from typing import Union
from ..host.log import logger
from .archive import ARCHIVE_EXTENSION


class BackupManager:
    """备份管理器类"""

    def __init__(self, plugin_instance):
        """
        初始化备份管理器
        :param plugin_instance: AutoVaultBackup插件实例
        """
        self.plugin = plugin_instance
        self.plugin_name = plugin_instance.plugin_name

    def cleanup_old_backups(self, directory: Union[str, Path], max_backups: int) -> int:
        """
        清理旧的备份文件，按修改时间保留最新的 max_backups 个
        max_backups 为 0 时不清理；清理过程中的错误只记录日志
        :return: 删除的文件数量
        """
        if max_backups <= 0:
            return 0

        deleted_count = 0
        try:
            logger.info(f"{self.plugin_name} 开始清理备份目录: {directory}, 保留数量: {max_backups}")
            backup_dir = Path(directory)

            files = []
            for f_path_obj in backup_dir.iterdir():
                if f_path_obj.is_file() and f_path_obj.name.endswith(ARCHIVE_EXTENSION):
                    files.append({'path': f_path_obj, 'name': f_path_obj.name, 'time': f_path_obj.stat().st_mtime})

            files.sort(key=lambda x: (x['time'], x['name']), reverse=True)

            if len(files) > max_backups:
                files_to_delete = files[max_backups:]
                logger.info(f"{self.plugin_name} 找到 {len(files_to_delete)} 个旧备份文件需要删除。")
                for f_info in files_to_delete:
                    f_info['path'].unlink()
                    deleted_count += 1
                    logger.info(f"{self.plugin_name} 已删除旧备份文件: {f_info['name']}")
            else:
                logger.info(f"{self.plugin_name} 当前备份数量 ({len(files)}) 未超过保留限制 ({max_backups})，无需清理。")
        except Exception as e:
            logger.error(f"{self.plugin_name} 清理旧备份文件时发生错误: {e}")
        return deleted_count

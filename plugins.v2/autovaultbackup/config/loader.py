"""
配置加载模块
负责加载插件配置并补全默认值
"""
from typing import Optional
from ..host.log import logger
from .settings import BackupSettings


class ConfigLoader:
    """配置加载器类"""
    
    def __init__(self, plugin_instance):
        """
        初始化配置加载器
        :param plugin_instance: AutoVaultBackup插件实例
        """
        self.plugin = plugin_instance
        self.plugin_name = plugin_instance.plugin_name
    
    def load_config(self, saved_config: Optional[dict] = None) -> BackupSettings:
        """从保存的配置中加载所有配置项，缺失项使用默认值"""
        if saved_config is None:
            saved_config = self.plugin.get_config()
        if saved_config is not None and not isinstance(saved_config, dict):
            logger.error(f"{self.plugin_name} 配置数据格式不正确 (期望字典，得到 {type(saved_config)})，使用默认配置")
            saved_config = None

        settings = BackupSettings.from_dict(saved_config)
        self.plugin._settings = settings

        if not settings.backup_directory:
            logger.info(f"{self.plugin_name} 备份目录未配置，使用插件数据目录下的默认目录")
        logger.debug(f"{self.plugin_name} 已加载配置: {settings.to_dict()}")
        return settings

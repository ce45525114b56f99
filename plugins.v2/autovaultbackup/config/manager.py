"""
配置管理模块
负责更新和保存插件配置
"""
from typing import Optional
from ..host.log import logger
from .settings import BackupSettings


class ConfigManager:
    """配置管理器类"""
    
    def __init__(self, plugin_instance):
        """
        初始化配置管理器
        :param plugin_instance: AutoVaultBackup插件实例
        """
        self.plugin = plugin_instance
        self.plugin_name = plugin_instance.plugin_name
    
    def update_config(self):
        """保存当前插件配置"""
        self.plugin.update_config(self.plugin._settings.to_dict())

    def apply_changes(self, values: Optional[dict] = None) -> BackupSettings:
        """合并设置面板提交的修改并保存"""
        settings = BackupSettings.from_dict({**self.plugin._settings.to_dict(), **(values or {})})
        self.plugin._settings = settings
        self.update_config()
        logger.info(f"{self.plugin_name} 配置已更新")
        return settings

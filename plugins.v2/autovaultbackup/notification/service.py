"""
通知服务模块
负责发送插件通知消息
"""
from typing import Optional
from ..host.log import logger

SUCCESS_NOTICE = "仓库备份已创建: {filename}"
FAILURE_NOTICE = "创建仓库备份失败，请查看日志了解详情。"


class NotificationService:
    """通知服务类"""
    
    def __init__(self, plugin_instance):
        """
        初始化通知服务
        :param plugin_instance: AutoVaultBackup插件实例
        """
        self.plugin = plugin_instance
        self.plugin_name = plugin_instance.plugin_name
    
    def send_notification(self, success: bool, filename: Optional[str] = None):
        """
        发送备份结果通知
        失败通知不包含具体错误，详情只记录在日志中
        """
        title = f"{self.plugin_name} "
        title += "成功" if success else "失败"
        text = SUCCESS_NOTICE.format(filename=filename or "") if success else FAILURE_NOTICE

        try:
            self.plugin.post_message(title=title, text=text)
        except Exception as e:
            logger.error(f"{self.plugin_name} 发送通知失败: {e}")

"""
通知接口模块
宿主提供的临时消息（Notice）通道
"""
from abc import ABC, abstractmethod

from .log import logger


class Notifier(ABC):
    """用户通知接口"""

    @abstractmethod
    def notify(self, title: str, text: str):
        """向用户显示一条临时通知"""


class LogNotifier(Notifier):
    """将通知写入日志，用于没有界面的宿主"""

    def notify(self, title: str, text: str):
        logger.info(f"[{title}] {text}")

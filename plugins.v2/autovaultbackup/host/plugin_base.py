"""
插件基类模块
插件通过 HostContext 访问宿主提供的仓库、存储和通知能力
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .log import logger
from .notice import LogNotifier, Notifier
from .storage import PluginStore
from .vault import Vault


@dataclass
class HostContext:
    """宿主运行环境"""
    vault: Vault
    store: PluginStore
    notifier: Notifier = field(default_factory=LogNotifier)
    # 插件数据目录，未指定时使用当前目录下的 plugins/<插件类名>
    data_path: Optional[Path] = None
    # 定时任务使用的时区
    timezone: str = "UTC"


class PluginBase:
    """插件基类"""
    # 插件名称
    plugin_name: str = ""
    # 插件描述
    plugin_desc: str = ""
    # 插件版本
    plugin_version: str = "1.0"

    def __init__(self, context: HostContext):
        self.context = context

    @property
    def vault(self) -> Vault:
        return self.context.vault

    def init_plugin(self, config: Optional[dict] = None):
        raise NotImplementedError

    def get_state(self) -> bool:
        raise NotImplementedError

    def get_command(self) -> List[Dict[str, Any]]:
        return []

    def get_api(self) -> List[Dict[str, Any]]:
        return []

    def get_service(self) -> List[Dict[str, Any]]:
        return []

    def get_form(self) -> Tuple[List[dict], Dict[str, Any]]:
        return [], {}

    def get_page(self) -> List[dict]:
        return []

    def stop_service(self):
        pass

    def get_config(self) -> Optional[dict]:
        """读取已保存的插件配置"""
        return self.context.store.load_config()

    def update_config(self, config: dict) -> bool:
        """保存插件配置"""
        self.context.store.save_config(config)
        return True

    def get_data(self, key: str) -> Any:
        return self.context.store.get_data(key)

    def save_data(self, key: str, value: Any):
        self.context.store.save_data(key, value)

    def get_data_path(self) -> Path:
        """插件数据目录，不存在时自动创建"""
        data_path = self.context.data_path or Path.cwd() / "plugins" / self.__class__.__name__.lower()
        data_path = Path(data_path)
        data_path.mkdir(parents=True, exist_ok=True)
        return data_path

    def post_message(self, title: str, text: str = ""):
        """向用户发送通知"""
        self.context.notifier.notify(title, text)
        logger.debug(f"{self.plugin_name} 已发送通知: {title}")

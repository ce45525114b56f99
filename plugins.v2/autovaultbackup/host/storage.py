"""
插件数据持久化模块
负责插件配置和运行数据（如备份历史）的保存与读取
"""
import json
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .log import logger


class PluginStore(ABC):
    """插件数据存储接口"""

    @abstractmethod
    def load_config(self) -> Optional[dict]:
        """读取插件配置，未保存过时返回 None"""

    @abstractmethod
    def save_config(self, config: dict):
        """保存插件配置"""

    @abstractmethod
    def get_data(self, key: str) -> Any:
        """读取插件数据"""

    @abstractmethod
    def save_data(self, key: str, value: Any):
        """保存插件数据"""


class JsonPluginStore(PluginStore):
    """
    以单个 JSON 文件保存插件数据
    文件结构: {"config": {...}, "data": {key: value}}
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            content = json.loads(self.path.read_text(encoding="utf-8"))
        except ValueError as e:
            logger.error(f"插件数据文件 {self.path} 格式错误，将按空数据处理: {e}")
            return {}
        if not isinstance(content, dict):
            logger.error(f"插件数据文件 {self.path} 内容不是对象 (得到 {type(content)})，将按空数据处理")
            return {}
        return content

    def _write(self, content: Dict[str, Any]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(content, ensure_ascii=False, indent=2), encoding="utf-8")

    def load_config(self) -> Optional[dict]:
        with self._lock:
            config = self._read().get("config")
        return dict(config) if isinstance(config, dict) else None

    def save_config(self, config: dict):
        with self._lock:
            content = self._read()
            content["config"] = dict(config)
            self._write(content)

    def get_data(self, key: str) -> Any:
        with self._lock:
            return self._read().get("data", {}).get(key)

    def save_data(self, key: str, value: Any):
        with self._lock:
            content = self._read()
            content.setdefault("data", {})[key] = value
            self._write(content)

"""
仓库访问模块
宿主提供的文档与附件枚举、读取接口，以及基于本地目录的实现
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import List, Union


@dataclass(frozen=True)
class VaultFile:
    """仓库内的文件，path 为相对仓库根目录的 POSIX 路径"""
    path: str

    @property
    def extension(self) -> str:
        """不带点的扩展名，没有扩展名时为空字符串"""
        suffix = PurePosixPath(self.path).suffix
        return suffix[1:] if suffix else ""


class Vault(ABC):
    """仓库接口"""

    @abstractmethod
    def get_name(self) -> str:
        """仓库名称"""

    @abstractmethod
    def get_files(self) -> List[VaultFile]:
        """仓库内所有文件"""

    def get_markdown_files(self) -> List[VaultFile]:
        """仓库内所有 Markdown 文档"""
        return [f for f in self.get_files() if f.extension == "md"]

    @abstractmethod
    def read(self, file: VaultFile) -> str:
        """读取文档文本内容"""

    @abstractmethod
    def read_binary(self, file: VaultFile) -> bytes:
        """读取文件二进制内容"""


class LocalVault(Vault):
    """以本地目录作为仓库，跳过以点开头的目录（如宿主配置目录）"""

    def __init__(self, root: Union[str, Path], name: str = None):
        self.root = Path(root)
        self._name = name or self.root.name

    def get_name(self) -> str:
        return self._name

    def get_files(self) -> List[VaultFile]:
        files = []
        for path in sorted(self.root.rglob("*")):
            relative = path.relative_to(self.root)
            if any(part.startswith(".") for part in relative.parts[:-1]):
                continue
            if path.is_file():
                files.append(VaultFile(relative.as_posix()))
        return files

    def _resolve(self, file: VaultFile) -> Path:
        return self.root.joinpath(*PurePosixPath(file.path).parts)

    def read(self, file: VaultFile) -> str:
        return self._resolve(file).read_text(encoding="utf-8")

    def read_binary(self, file: VaultFile) -> bytes:
        return self._resolve(file).read_bytes()

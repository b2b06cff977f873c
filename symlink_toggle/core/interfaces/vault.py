"""Vault 存储后端接口定义"""

from abc import ABC, abstractmethod
from typing import Optional


class IVaultAdapter(ABC):
    """宿主 vault 存储适配器接口"""

    @property
    @abstractmethod
    def name(self) -> str:
        """适配器名称"""
        pass

    @property
    @abstractmethod
    def is_filesystem_backed(self) -> bool:
        """是否由真实文件系统承载"""
        pass

    @abstractmethod
    def get_base_path(self) -> Optional[str]:
        """vault 在磁盘上的根目录，非文件系统后端返回 None"""
        pass

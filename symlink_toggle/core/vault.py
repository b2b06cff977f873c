"""Vault 适配器

把 vault 内的相对路径解析为磁盘上的绝对路径。is_filesystem_backed 为 False
或没有根目录的后端在解析时抛出 ConfigurationError。
"""

import os
from pathlib import Path
from typing import Optional, Union

from symlink_toggle.core.exceptions import ConfigurationError
from symlink_toggle.core.interfaces.vault import IVaultAdapter
from symlink_toggle.core.logger import get_logger

logger = get_logger("vault")


class FileSystemVaultAdapter(IVaultAdapter):
    """由本地目录承载的 vault"""

    def __init__(self, base_path: Union[str, Path]):
        self._base_path = os.path.abspath(str(base_path))

    @property
    def name(self) -> str:
        return "filesystem"

    @property
    def is_filesystem_backed(self) -> bool:
        return True

    def get_base_path(self) -> str:
        """获取 vault 根目录"""
        return self._base_path


class MemoryVaultAdapter(IVaultAdapter):
    """不落盘的 vault（例如移动端或测试用的内存存储）"""

    @property
    def name(self) -> str:
        return "memory"

    @property
    def is_filesystem_backed(self) -> bool:
        return False

    def get_base_path(self) -> Optional[str]:
        return None


def resolve_vault_path(adapter: IVaultAdapter, relative_path: str) -> str:
    """把 vault 相对路径解析为绝对路径

    直接拼接 ``<根目录>/<相对路径>``，不做其他规范化。

    Args:
        adapter: vault 适配器
        relative_path: 相对 vault 根目录的路径

    Returns:
        绝对路径字符串

    Raises:
        ConfigurationError: 适配器不是文件系统后端，或路径为空、指向根目录本身
    """
    base_path = adapter.get_base_path() if adapter.is_filesystem_backed else None
    if not base_path:
        logger.warning("Vault adapter is not filesystem-backed", adapter=adapter.name)
        raise ConfigurationError(
            "vault adapter is not filesystem-backed",
            details={"adapter": adapter.name}
        )
    base_path = os.path.abspath(base_path)

    if not relative_path or not relative_path.strip():
        raise ConfigurationError(
            "symlink path is not configured",
            details={"symlink_path": relative_path}
        )

    absolute_path = base_path + '/' + relative_path

    # "." 或 "/" 之类的值最终会落在根目录上，拒绝以免删除 vault 本身
    if os.path.normpath(absolute_path) == os.path.normpath(base_path):
        raise ConfigurationError(
            f"symlink path resolves to the vault root: {relative_path}",
            details={"symlink_path": relative_path, "base_path": base_path}
        )

    logger.debug("Resolved vault path", relative=relative_path, absolute=absolute_path)
    return absolute_path

"""路径存在性检查

使用 lstat 检查路径本身（不跟随链接），因此悬空的符号链接也算存在。
只有 ENOENT 会被视为 "不存在"，其他错误一律作为 SymlinkQueryError 抛出。
"""

import asyncio
import errno
import os

from symlink_toggle.core.exceptions import SymlinkQueryError
from symlink_toggle.core.logger import get_logger

logger = get_logger("existence")


def symlink_exists(path: str) -> bool:
    """检查路径上是否存在任何文件系统条目

    Args:
        path: 非空绝对路径

    Returns:
        存在（包括悬空符号链接）返回 True，不存在返回 False

    Raises:
        ValueError: 路径为空或不是绝对路径
        SymlinkQueryError: 除 "不存在" 以外的查询错误
    """
    if not path or not os.path.isabs(path):
        raise ValueError(f"path must be a non-empty absolute path: {path!r}")

    try:
        os.lstat(path)
    except OSError as e:
        if e.errno == errno.ENOENT:
            logger.debug("Path not found", path=path)
            return False
        logger.warning("Failed to query path", path=path, error=str(e))
        raise SymlinkQueryError(
            f"Error: {e.strerror or e}, lstat '{path}'",
            details={"path": path, "errno": e.errno}
        ) from e
    except ValueError as e:
        # 内嵌 NUL 或无法编码的字符
        logger.warning("Invalid path for query", path=repr(path), error=str(e))
        raise SymlinkQueryError(
            f"Error: {e}, lstat {path!r}",
            details={"path": path}
        ) from e

    logger.debug("Path exists", path=path)
    return True


async def check_exists(path: str) -> bool:
    """symlink_exists 的异步版本，查询在工作线程中执行"""
    return await asyncio.to_thread(symlink_exists, path)

"""符号链接切换控制器

链接不存在则创建，存在则删除。所有结果（成功或失败）都通过通知器报告，
不会有异常逃逸到调用方的事件循环中。
"""

import asyncio
import os
from typing import Optional, Set

from symlink_toggle.core.exceptions import (
    ConfigurationError,
    SymlinkMutationError,
    SymlinkToggleException,
    ToggleInProgressError,
)
from symlink_toggle.core.existence import check_exists
from symlink_toggle.core.interfaces.surface import INotifier, NoticeLevel
from symlink_toggle.core.interfaces.vault import IVaultAdapter
from symlink_toggle.core.logger import OperationScope, get_logger
from symlink_toggle.core.status import StatusIndicator
from symlink_toggle.core.vault import resolve_vault_path

logger = get_logger("toggle_controller")

ERROR_PREFIX = "Symlink toggle error: "


class SymlinkToggleController:
    """符号链接切换控制器

    每次切换最多执行一次查询和一次修改，不重试。
    single_flight 为 True 时，同一路径上正在进行的切换会拒绝后续调用。
    """

    def __init__(
        self,
        vault: IVaultAdapter,
        notifier: INotifier,
        status: Optional[StatusIndicator] = None,
        single_flight: bool = True,
    ):
        """初始化切换控制器

        Args:
            vault: vault 适配器，用于解析链接的绝对路径
            notifier: 结果通知器
            status: 状态指示器，切换成功后更新
            single_flight: 是否启用同路径并发保护
        """
        self.vault = vault
        self.notifier = notifier
        self.status = status
        self.single_flight = single_flight
        self._in_flight: Set[str] = set()

    def resolve_link_path(self, symlink_path: str) -> str:
        """解析链接的绝对路径

        Raises:
            ConfigurationError: vault 不是文件系统后端或路径无效
        """
        return resolve_vault_path(self.vault, symlink_path)

    async def query(self, symlink_path: str) -> bool:
        """查询链接是否存在并刷新状态指示器

        Raises:
            ConfigurationError: 路径无法解析
            SymlinkQueryError: 查询失败
        """
        present = await check_exists(self.resolve_link_path(symlink_path))
        if self.status is not None:
            self.status.update(present)
        return present

    async def toggle(self, target: str, symlink_path: str) -> None:
        """切换符号链接

        Args:
            target: 链接指向的路径
            symlink_path: 链接位置（相对 vault 根目录）
        """
        try:
            link_path = self.resolve_link_path(symlink_path)
        except ConfigurationError as e:
            self._notify_error(e)
            return

        if self.single_flight and link_path in self._in_flight:
            self._notify_error(ToggleInProgressError(
                f"toggle already in progress for {link_path}",
                details={"path": link_path}
            ))
            return

        self._in_flight.add(link_path)
        try:
            with OperationScope("symlink_toggle", {"path": link_path, "target": target}):
                if await check_exists(link_path):
                    await self._remove(link_path)
                    self._update_status(False)
                    self.notifier.notify(f"Symlink removed: {link_path}")
                else:
                    await self._create(target, link_path)
                    self._update_status(True)
                    self.notifier.notify(f"Symlink created: {link_path} -> {target}")
        except SymlinkToggleException as e:
            self._notify_error(e)
        finally:
            self._in_flight.discard(link_path)

    async def _create(self, target: str, link_path: str) -> None:
        if not target or not target.strip():
            raise ConfigurationError(
                "symlink target is not configured",
                details={"path": link_path}
            )

        try:
            await asyncio.to_thread(os.symlink, target, link_path)
        except (OSError, ValueError) as e:
            raise SymlinkMutationError(
                f"failed to create symlink {link_path} -> {target!r}: {getattr(e, 'strerror', None) or e}",
                details={"path": link_path, "target": target, "errno": getattr(e, "errno", None)}
            ) from e

        logger.info("Symlink created", path=link_path, target=target)

    async def _remove(self, link_path: str) -> None:
        # 只 unlink，不做目录树删除；目录会以错误形式报告
        try:
            await asyncio.to_thread(os.unlink, link_path)
        except (OSError, ValueError) as e:
            raise SymlinkMutationError(
                f"failed to remove {link_path!r}: {getattr(e, 'strerror', None) or e}",
                details={"path": link_path, "errno": getattr(e, "errno", None)}
            ) from e

        logger.info("Symlink removed", path=link_path)

    def _update_status(self, present: bool) -> None:
        if self.status is not None:
            self.status.update(present)

    def _notify_error(self, error: SymlinkToggleException) -> None:
        logger.warning("Symlink toggle failed", error_type=type(error).__name__, error=error.message)
        self.notifier.notify(ERROR_PREFIX + error.message, NoticeLevel.ERROR)

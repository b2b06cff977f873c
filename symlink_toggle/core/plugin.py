"""插件生命周期

start() 装配配置、控制器和状态指示器并返回句柄，stop() 使句柄失效。
没有任何全局插件状态，宿主持有句柄即可。
"""

from dataclasses import dataclass, field
from typing import List, Optional

from symlink_toggle.core.config_manager import SettingsManager
from symlink_toggle.core.data_structures import SettingField, ToggleSettings
from symlink_toggle.core.exceptions import SymlinkToggleException
from symlink_toggle.core.interfaces.surface import INotifier, IStatusSurface
from symlink_toggle.core.interfaces.vault import IVaultAdapter
from symlink_toggle.core.logger import get_logger
from symlink_toggle.core.status import StatusIndicator
from symlink_toggle.core.toggle_controller import SymlinkToggleController

logger = get_logger("plugin")


def build_settings_schema(settings_manager: SettingsManager) -> List[SettingField]:
    """构造设置面板的字段描述

    每个字段的 on_change 回调都会立即持久化新值。
    """
    def persist(key: str):
        return lambda value: settings_manager.update(key, value)

    return [
        SettingField(
            name="symlinkTarget",
            label="Symlink target",
            description="The path (directory) to be symlinked",
            on_change=persist("symlinkTarget"),
        ),
        SettingField(
            name="symlinkPath",
            label="Symlink path",
            description="The location to create the symlink",
            on_change=persist("symlinkPath"),
        ),
    ]


@dataclass
class PluginHandle:
    """运行中的插件实例"""
    settings_manager: SettingsManager
    controller: SymlinkToggleController
    status: StatusIndicator
    settings_schema: List[SettingField] = field(default_factory=list)
    active: bool = True
    status_error: Optional[SymlinkToggleException] = None

    @property
    def settings(self) -> ToggleSettings:
        """当前配置快照"""
        return ToggleSettings.from_dict(self.settings_manager.settings)

    async def trigger(self) -> None:
        """UI 触发入口：用当前配置执行一次切换"""
        if not self.active:
            logger.warning("Trigger ignored, plugin is stopped")
            return

        settings = self.settings
        await self.controller.toggle(settings.symlink_target, settings.symlink_path)

    async def refresh_status(self) -> Optional[bool]:
        """重新查询链接存在性

        查询失败时记录警告并返回 None，错误保存在 status_error 中，状态栏保持不变。
        """
        try:
            present = await self.controller.query(self.settings.symlink_path)
        except SymlinkToggleException as e:
            logger.warning("Unable to determine symlink status", error=e.message)
            self.status_error = e
            return None

        self.status_error = None
        return present


async def start(
    settings_manager: SettingsManager,
    vault: IVaultAdapter,
    notifier: INotifier,
    status_surface: Optional[IStatusSurface] = None,
    single_flight: bool = True,
) -> PluginHandle:
    """启动插件

    加载一次配置，装配控制器，并渲染初始状态。

    Args:
        settings_manager: 配置存储
        vault: vault 适配器
        notifier: 消息通知器
        status_surface: 状态栏，None 表示宿主没有状态栏
        single_flight: 是否启用同路径并发保护

    Returns:
        插件句柄

    Raises:
        ConfigException: 配置文件无法加载
    """
    settings_manager.load_settings()

    status = StatusIndicator(status_surface)
    controller = SymlinkToggleController(vault, notifier, status, single_flight=single_flight)
    handle = PluginHandle(
        settings_manager=settings_manager,
        controller=controller,
        status=status,
        settings_schema=build_settings_schema(settings_manager),
    )

    await handle.refresh_status()
    logger.info("Plugin started", vault=vault.name, present=status.present)
    return handle


def stop(handle: PluginHandle) -> None:
    """停止插件，之后的触发将被忽略"""
    handle.active = False
    logger.info("Plugin stopped")

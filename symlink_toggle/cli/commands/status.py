"""status 命令实现

相当于宿主的状态栏：显示链接当前是否存在。"""

import asyncio
import sys
from pathlib import Path
from typing import Optional

import click

from symlink_toggle.core import plugin
from symlink_toggle.core.config_manager import SettingsManager
from symlink_toggle.core.exceptions import SymlinkToggleException
from symlink_toggle.core.logger import get_logger
from symlink_toggle.core.vault import FileSystemVaultAdapter
from symlink_toggle.cli.utils.formatting import FormatterConfig, OutputFormatter
from symlink_toggle.cli.utils.surfaces import ConsoleNotifier, ConsoleStatusBar

logger = get_logger("status_command")


class StatusCommand:
    """状态显示命令处理器"""

    def __init__(self, vault_path: Optional[Path] = None, formatter: Optional[OutputFormatter] = None):
        self.vault_path = Path(vault_path) if vault_path else Path.cwd()
        self.formatter = formatter or OutputFormatter()
        self.status_bar = ConsoleStatusBar()

    async def run(self) -> bool:
        """查询存在性

        Returns:
            链接是否存在

        Raises:
            ConfigurationError: 链接路径未配置或无效
            SymlinkQueryError: 查询失败
        """
        logger.debug("Status requested", vault=str(self.vault_path))
        handle = await plugin.start(
            SettingsManager(self.vault_path),
            FileSystemVaultAdapter(self.vault_path),
            ConsoleNotifier(self.formatter),
            self.status_bar,
        )
        plugin.stop(handle)

        if handle.status_error is not None:
            raise handle.status_error
        return handle.status.present

    def execute(self) -> str:
        asyncio.run(self.run())
        return self.status_bar.text


@click.command()
@click.pass_context
def status(ctx):
    """显示符号链接状态"""
    obj = ctx.ensure_object(dict)
    formatter = OutputFormatter(FormatterConfig(**obj.get('formatter_config', {})))
    cmd = StatusCommand(obj.get('vault'), formatter)

    try:
        click.echo(formatter.info(cmd.execute()))
    except SymlinkToggleException as e:
        click.echo(formatter.error(f"Unable to determine symlink status: {e.message}"), err=True)
        sys.exit(1)

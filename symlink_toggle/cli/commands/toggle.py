"""toggle 命令实现

相当于宿主的功能区按钮：启动插件并触发一次切换。"""

import asyncio
import sys
from pathlib import Path
from typing import Optional

import click

from symlink_toggle.core import plugin
from symlink_toggle.core.config_manager import SettingsManager
from symlink_toggle.core.logger import get_logger
from symlink_toggle.core.vault import FileSystemVaultAdapter
from symlink_toggle.cli.utils.formatting import FormatterConfig, OutputFormatter
from symlink_toggle.cli.utils.surfaces import ConsoleNotifier, ConsoleStatusBar

logger = get_logger("toggle_command")


class ToggleCommand:
    """切换命令处理器"""

    def __init__(self, vault_path: Optional[Path] = None, formatter: Optional[OutputFormatter] = None):
        """初始化命令处理器

        Args:
            vault_path: vault 根目录，默认为当前目录
            formatter: 输出格式化器
        """
        self.vault_path = Path(vault_path) if vault_path else Path.cwd()
        self.formatter = formatter or OutputFormatter()
        self.notifier = ConsoleNotifier(self.formatter)
        self.status_bar = ConsoleStatusBar()

    async def run(self) -> bool:
        """执行一次切换

        Returns:
            没有错误通知时返回 True
        """
        logger.info("Toggle requested", vault=str(self.vault_path))
        handle = await plugin.start(
            SettingsManager(self.vault_path),
            FileSystemVaultAdapter(self.vault_path),
            self.notifier,
            self.status_bar,
        )
        try:
            await handle.trigger()
        finally:
            plugin.stop(handle)
        return self.notifier.error_count == 0

    def execute(self) -> bool:
        return asyncio.run(self.run())


@click.command()
@click.pass_context
def toggle(ctx):
    """创建或删除配置的符号链接"""
    obj = ctx.ensure_object(dict)
    formatter = OutputFormatter(FormatterConfig(**obj.get('formatter_config', {})))
    cmd = ToggleCommand(obj.get('vault'), formatter)

    ok = cmd.execute()
    if cmd.status_bar.text:
        click.echo(formatter.info(cmd.status_bar.text))
    if not ok:
        sys.exit(1)

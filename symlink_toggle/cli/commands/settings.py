"""settings 命令实现

相当于宿主的设置面板：查看和编辑两个配置字段。"""

import sys
from pathlib import Path
from typing import List, Optional

import click

from symlink_toggle.core.config_manager import SettingsManager
from symlink_toggle.core.data_structures import SettingField
from symlink_toggle.core.exceptions import ConfigException
from symlink_toggle.core.logger import get_logger
from symlink_toggle.core.plugin import build_settings_schema
from symlink_toggle.cli.utils.formatting import FormatterConfig, OutputFormatter

logger = get_logger("settings_command")


class SettingsCommand:
    """配置管理命令"""

    def __init__(self, vault_path: Optional[Path] = None, formatter: Optional[OutputFormatter] = None):
        self.vault_path = Path(vault_path) if vault_path else Path.cwd()
        self.formatter = formatter or OutputFormatter()
        self.settings_manager = SettingsManager(self.vault_path)
        self.fields: List[SettingField] = build_settings_schema(self.settings_manager)

    def execute_show(self) -> str:
        """渲染所有字段"""
        return self.formatter.format_settings(self.fields, self.settings_manager.load_settings())

    def execute_get(self, name: str) -> str:
        """获取字段值"""
        self._find_field(name)
        return self.settings_manager.load_settings()[name]

    def execute_set(self, name: str, value: str) -> str:
        """通过字段回调修改并保存"""
        field = self._find_field(name)
        self.settings_manager.load_settings()
        field.change(value)
        logger.info("Setting changed", name=name)
        return self.formatter.success(f"{field.label} set to '{value}'")

    def _find_field(self, name: str) -> SettingField:
        for field in self.fields:
            if field.name == name:
                return field
        valid = ", ".join(f.name for f in self.fields)
        raise ConfigException(f"Unknown setting '{name}' (expected one of: {valid})")


def _make_command(ctx) -> SettingsCommand:
    obj = ctx.ensure_object(dict)
    formatter = OutputFormatter(FormatterConfig(**obj.get('formatter_config', {})))
    return SettingsCommand(obj.get('vault'), formatter)


@click.group()
def settings():
    """查看和修改插件配置"""
    pass


@settings.command('show')
@click.pass_context
def settings_show(ctx):
    """显示所有配置字段"""
    cmd = _make_command(ctx)
    try:
        click.echo(cmd.execute_show())
    except ConfigException as e:
        click.echo(cmd.formatter.error(e.message), err=True)
        sys.exit(1)


@settings.command('get')
@click.argument('name')
@click.pass_context
def settings_get(ctx, name: str):
    """获取配置字段的值"""
    cmd = _make_command(ctx)
    try:
        click.echo(cmd.execute_get(name))
    except ConfigException as e:
        click.echo(cmd.formatter.error(e.message), err=True)
        sys.exit(1)


@settings.command('set')
@click.argument('name')
@click.argument('value')
@click.pass_context
def settings_set(ctx, name: str, value: str):
    """设置配置字段的值并立即保存"""
    cmd = _make_command(ctx)
    try:
        click.echo(cmd.execute_set(name, value))
    except ConfigException as e:
        click.echo(cmd.formatter.error(e.message), err=True)
        sys.exit(1)

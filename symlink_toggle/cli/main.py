"""Symlink Toggle CLI 主入口"""

import sys
from pathlib import Path

import click

from symlink_toggle import __version__
from symlink_toggle.cli.commands.settings import settings
from symlink_toggle.cli.commands.status import status
from symlink_toggle.cli.commands.toggle import toggle
from symlink_toggle.core.exceptions import SymlinkToggleException
from symlink_toggle.core.logger import LoggerConfig, configure_logger


@click.group()
@click.version_option(version=__version__)
@click.option(
    '--vault',
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help='vault 根目录（默认当前目录）'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='详细日志输出（调试用）'
)
@click.option(
    '--no-color',
    is_flag=True,
    help='关闭彩色输出'
)
@click.pass_context
def cli(ctx, vault, verbose, no_color):
    """Symlink Toggle - 在 vault 中切换一个符号链接

    命令：
      toggle                  创建或删除符号链接
      status                  查看符号链接状态
      settings show|get|set   查看或修改配置

    示例:
      symlink-toggle settings set symlinkTarget /data/real
      symlink-toggle settings set symlinkPath link
      symlink-toggle toggle
    """
    ctx.ensure_object(dict)
    ctx.obj['vault'] = vault
    ctx.obj['verbose'] = verbose
    ctx.obj['formatter_config'] = {'no_color': no_color}

    if verbose:
        configure_logger(LoggerConfig(level="DEBUG", console_output=True))


cli.add_command(toggle)
cli.add_command(status)
cli.add_command(settings)


def main():
    """CLI 入口点，处理全局异常"""
    try:
        cli()
    except SymlinkToggleException as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

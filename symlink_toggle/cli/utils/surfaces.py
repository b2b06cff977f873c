"""控制台上的通知器与状态栏实现"""

from typing import List, Optional

import click

from symlink_toggle.core.interfaces.surface import INotifier, IStatusSurface, NoticeLevel
from symlink_toggle.cli.utils.formatting import OutputFormatter


class ConsoleNotifier(INotifier):
    """把通知输出到终端，错误写到 stderr"""

    def __init__(self, formatter: Optional[OutputFormatter] = None):
        self.formatter = formatter or OutputFormatter()
        self.messages: List[str] = []
        self.error_count = 0

    def notify(self, message: str, level: NoticeLevel = NoticeLevel.INFO) -> None:
        self.messages.append(message)
        if level == NoticeLevel.ERROR:
            self.error_count += 1
            click.echo(self.formatter.error(message), err=True)
        else:
            click.echo(self.formatter.success(message))


class ConsoleStatusBar(IStatusSurface):
    """记录最近一次状态文本，由命令决定何时输出"""

    def __init__(self):
        self.text = ""

    def set_text(self, text: str) -> None:
        self.text = text

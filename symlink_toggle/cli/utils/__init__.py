"""CLI 工具包导出"""

from .formatting import OutputFormatter, FormatterConfig, Color
from .surfaces import ConsoleNotifier, ConsoleStatusBar

__all__ = [
    'OutputFormatter',
    'FormatterConfig',
    'Color',
    'ConsoleNotifier',
    'ConsoleStatusBar',
]

"""CLI 输出格式化工具"""

from typing import List, Optional

from symlink_toggle.core.data_structures import SettingField


class Color:
    """ANSI 颜色代码"""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'

    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'


class FormatterConfig:
    """格式化配置"""

    def __init__(self, no_color: bool = False):
        self.no_color = no_color

    def colorize(self, text: str, color: str) -> str:
        """根据配置为文本添加 ANSI 颜色"""
        if self.no_color:
            return text
        return f"{color}{text}{Color.RESET}"


class OutputFormatter:
    """CLI 输出格式化器"""

    def __init__(self, config: Optional[FormatterConfig] = None):
        self.config = config or FormatterConfig()

    def success(self, message: str) -> str:
        """格式化成功消息"""
        prefix = self.config.colorize("+", Color.GREEN)
        return f"{prefix} {message}"

    def error(self, message: str) -> str:
        """格式化错误消息"""
        prefix = self.config.colorize("-", Color.RED)
        return f"{prefix} {message}"

    def warning(self, message: str) -> str:
        prefix = self.config.colorize("!", Color.YELLOW)
        return f"{prefix} {message}"

    def info(self, message: str) -> str:
        prefix = self.config.colorize("*", Color.BLUE)
        return f"{prefix} {message}"

    def format_settings(self, fields: List[SettingField], values: dict) -> str:
        """把设置面板渲染为文本

        Args:
            fields: 字段描述
            values: 当前配置值
        """
        lines = []
        for f in fields:
            value = values.get(f.name, "")
            shown = value if value else self.config.colorize("(empty)", Color.DIM)
            lines.append(f"{self.config.colorize(f.label, Color.BOLD)} [{f.name}]")
            lines.append(f"  {f.description}")
            lines.append(f"  = {shown}")
        return "\n".join(lines)

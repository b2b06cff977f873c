"""通知与状态栏接口定义"""

from abc import ABC, abstractmethod
from enum import Enum


class NoticeLevel(Enum):
    """通知级别"""
    INFO = "info"
    ERROR = "error"


class INotifier(ABC):
    """一次性消息通知接口（发出即忘）"""

    @abstractmethod
    def notify(self, message: str, level: NoticeLevel = NoticeLevel.INFO) -> None:
        """显示一条临时消息"""
        pass


class IStatusSurface(ABC):
    """常驻状态文本接口"""

    @abstractmethod
    def set_text(self, text: str) -> None:
        """替换状态文本"""
        pass

"""配置管理接口定义"""

from abc import ABC, abstractmethod
from typing import Dict


class ISettingsManager(ABC):
    """插件配置存储接口"""

    @abstractmethod
    def load_settings(self) -> Dict[str, str]:
        """加载配置"""
        pass

    @abstractmethod
    def save_settings(self, settings: Dict[str, str]) -> None:
        """保存配置"""
        pass

    @abstractmethod
    def update(self, key: str, value: str) -> None:
        """修改单个字段并立即持久化"""
        pass

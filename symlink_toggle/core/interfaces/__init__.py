"""宿主协作方接口定义"""

from .vault import IVaultAdapter
from .surface import INotifier, IStatusSurface, NoticeLevel
from .config import ISettingsManager

__all__ = [
    'IVaultAdapter',
    'INotifier',
    'IStatusSurface',
    'NoticeLevel',
    'ISettingsManager',
]

"""状态指示器

把缓存的存在性布尔值渲染到宿主状态栏。
"""

from typing import Optional

from symlink_toggle.core.interfaces.surface import IStatusSurface
from symlink_toggle.core.logger import get_logger

logger = get_logger("status")

LABEL_PRESENT = "Symlink: present"
LABEL_CLEAR = "Symlink: clear"


def render_label(present: bool) -> str:
    """存在性对应的状态文本"""
    return LABEL_PRESENT if present else LABEL_CLEAR


class StatusIndicator:
    """状态指示器

    只保存最近一次已知的存在性，未知时为 None。
    """

    def __init__(self, surface: Optional[IStatusSurface] = None):
        self.surface = surface
        self.present: Optional[bool] = None

    @property
    def label(self) -> Optional[str]:
        """当前状态文本，未知时为 None"""
        if self.present is None:
            return None
        return render_label(self.present)

    def update(self, present: bool) -> None:
        """更新缓存值并刷新状态栏"""
        self.present = present
        logger.debug("Status updated", present=present)
        if self.surface is not None:
            self.surface.set_text(render_label(present))

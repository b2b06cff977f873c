"""核心数据结构定义"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional


@dataclass
class ToggleSettings:
    """插件配置

    symlink_target: 链接指向的路径
    symlink_path: 链接本身的位置（相对 vault 根目录）
    """
    symlink_target: str = ""
    symlink_path: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> 'ToggleSettings':
        """从持久化格式构造"""
        return cls(
            symlink_target=data.get("symlinkTarget", ""),
            symlink_path=data.get("symlinkPath", ""),
        )

    def to_dict(self) -> Dict[str, str]:
        """转换为持久化格式"""
        return {
            "symlinkTarget": self.symlink_target,
            "symlinkPath": self.symlink_path,
        }


@dataclass
class SettingField:
    """设置面板中的一个文本字段描述"""
    name: str
    label: str
    description: str
    placeholder: str = "..."
    on_change: Optional[Callable[[str], None]] = field(default=None, repr=False, compare=False)

    def change(self, value: str) -> None:
        """用户编辑字段时调用"""
        if self.on_change is not None:
            self.on_change(value)

"""Symlink Toggle - 在宿主 vault 中切换一个符号链接"""

__version__ = "0.1.0"

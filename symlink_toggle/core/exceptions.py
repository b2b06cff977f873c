"""Symlink Toggle 异常体系"""


class SymlinkToggleException(Exception):
    """基础异常类"""
    def __init__(self, message: str, details=None):
        self.message = message
        self.details = details
        super().__init__(self.message)


# 配置相关异常
class ConfigException(SymlinkToggleException):
    """配置异常"""
    pass


class ConfigParseError(ConfigException):
    """配置解析失败"""
    pass


class ConfigIOError(ConfigException):
    """配置文件读写失败"""
    pass


class ConfigValidationError(ConfigException):
    """配置验证失败"""
    pass


class ConfigurationError(ConfigException):
    """宿主无法提供可用的文件系统路径，切换前即中止"""
    pass


# 符号链接异常
class SymlinkException(SymlinkToggleException):
    """符号链接异常"""
    pass


class SymlinkQueryError(SymlinkException):
    """存在性查询失败（除 "不存在" 以外的任何错误）"""
    pass


class SymlinkMutationError(SymlinkException):
    """符号链接创建或删除失败"""
    pass


class ToggleInProgressError(SymlinkException):
    """同一路径上已有切换正在进行"""
    pass

"""配置管理器

负责 .symlink-toggle.yaml 的加载、验证和保存。
配置只有两个字符串字段：symlinkTarget 与 symlinkPath。
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from symlink_toggle.core.exceptions import (
    ConfigException,
    ConfigIOError,
    ConfigParseError,
    ConfigValidationError,
)
from symlink_toggle.core.interfaces.config import ISettingsManager
from symlink_toggle.core.logger import get_logger

logger = get_logger("config_manager")


DEFAULT_SETTINGS = {
    "symlinkTarget": "",
    "symlinkPath": "",
}


class SettingsManager(ISettingsManager):
    """插件配置管理器

    启动时读取一次配置（持久化值覆盖默认值），之后每次修改字段都立即写回。
    """

    CONFIG_FILENAME = ".symlink-toggle.yaml"

    def __init__(self, vault_root: Optional[Union[str, Path]] = None, config_path: Optional[Path] = None):
        """初始化配置管理器

        Args:
            vault_root: vault 根目录，默认为当前目录
            config_path: 配置文件路径，默认为 <vault_root>/.symlink-toggle.yaml
        """
        self.vault_root = Path(vault_root) if vault_root else Path.cwd()
        self._config_path = Path(config_path) if config_path else None
        self._settings: Optional[Dict[str, str]] = None
        logger.info("SettingsManager initialized", config_path=str(self.config_path))

    @property
    def config_path(self) -> Path:
        """获取配置文件路径"""
        return self._config_path or self.vault_root / self.CONFIG_FILENAME

    @property
    def settings(self) -> Dict[str, str]:
        """当前配置（未加载时先加载）"""
        if self._settings is None:
            self.load_settings()
        return self._settings

    def get_default_settings(self) -> Dict[str, str]:
        """获取默认配置的拷贝"""
        return copy.deepcopy(DEFAULT_SETTINGS)

    def load_settings(self) -> Dict[str, str]:
        """加载配置文件

        文件不存在或为空时使用默认值；缺失的键取默认值，未知的键被丢弃。

        Returns:
            配置字典

        Raises:
            ConfigIOError: 文件读取失败时抛出
            ConfigParseError: YAML 解析失败或顶层不是映射时抛出
            ConfigValidationError: 字段值不是字符串时抛出
        """
        path = self.config_path

        logger.info("Loading settings", path=str(path))

        if not path.exists():
            logger.info("Settings file not found, using defaults", path=str(path))
            self._settings = self.get_default_settings()
            return self._settings

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("Failed to parse YAML settings", path=str(path), error=str(e))
            raise ConfigParseError(f"Failed to parse YAML settings: {e}", details=str(e))
        except IOError as e:
            logger.error("Failed to read settings file", path=str(path), error=str(e))
            raise ConfigIOError(f"Failed to read settings file: {e}", details=str(e))

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigParseError(
                "Settings file must contain a mapping",
                details={"path": str(path), "type": type(data).__name__}
            )

        unknown = sorted(set(data) - set(DEFAULT_SETTINGS))
        if unknown:
            logger.warning("Ignoring unknown settings keys", keys=unknown)

        settings = self.get_default_settings()
        for key in DEFAULT_SETTINGS:
            if key in data:
                settings[key] = data[key]

        self.validate_settings(settings)
        self._settings = settings
        logger.info("Settings loaded successfully", path=str(path))
        return self._settings

    def validate_settings(self, settings: Optional[Dict[str, Any]] = None) -> bool:
        """验证配置结构

        空字符串是合法值；是否允许为空由切换操作自行判断。

        Raises:
            ConfigValidationError: 配置验证失败时抛出
        """
        cfg = settings if settings is not None else self._settings

        if cfg is None:
            raise ConfigValidationError("No settings loaded or provided")

        errors = []
        for key in DEFAULT_SETTINGS:
            if key not in cfg:
                errors.append(f"Missing required key: {key}")
            elif not isinstance(cfg[key], str):
                errors.append(f"{key} must be a string")

        for key in cfg:
            if key not in DEFAULT_SETTINGS:
                errors.append(f"Unknown key: {key}")

        if errors:
            logger.error("Settings validation failed", errors=errors)
            raise ConfigValidationError(f"Settings validation failed: {'; '.join(errors)}")

        return True

    def save_settings(self, settings: Optional[Dict[str, str]] = None) -> None:
        """保存配置到文件

        Raises:
            ConfigIOError: 文件写入失败时抛出
            ConfigValidationError: 配置验证失败时抛出
        """
        cfg = settings if settings is not None else self._settings

        if cfg is None:
            raise ConfigException("No settings to save")

        self.validate_settings(cfg)

        path = self.config_path
        logger.info("Saving settings", path=str(path))

        try:
            with open(path, "w", encoding="utf-8") as f:
                yaml.dump(
                    dict(cfg),
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    allow_unicode=True,
                )
        except IOError as e:
            logger.error("Failed to write settings file", path=str(path), error=str(e))
            raise ConfigIOError(f"Failed to write settings file: {e}", details=str(e))

        self._settings = cfg
        logger.info("Settings saved successfully", path=str(path))

    def get(self, key: str, default: Any = None) -> Any:
        """获取单个配置值"""
        return self.settings.get(key, default)

    def update(self, key: str, value: str) -> None:
        """修改单个字段并立即持久化

        Raises:
            ConfigValidationError: 未知字段或值不是字符串
        """
        if key not in DEFAULT_SETTINGS:
            raise ConfigValidationError(
                f"Unknown setting: {key}",
                details={"valid_keys": list(DEFAULT_SETTINGS)}
            )

        updated = dict(self.settings)
        updated[key] = value
        self.save_settings(updated)
        logger.debug("Setting updated", key=key)

    def reload(self) -> Dict[str, str]:
        """重新加载配置文件"""
        self._settings = None
        logger.info("Reloading settings")
        return self.load_settings()

    def reset_to_defaults(self) -> None:
        """重置配置为默认值（不写盘）"""
        self._settings = self.get_default_settings()
        logger.info("Settings reset to defaults")

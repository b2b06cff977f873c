"""插件生命周期测试"""

import asyncio
import os
from unittest.mock import patch

import pytest

from symlink_toggle.core import plugin
from symlink_toggle.core.config_manager import SettingsManager
from symlink_toggle.core.data_structures import SettingField, ToggleSettings
from symlink_toggle.core.exceptions import ConfigParseError, ConfigurationError, SymlinkQueryError
from symlink_toggle.core.status import LABEL_CLEAR, LABEL_PRESENT
from symlink_toggle.core.vault import FileSystemVaultAdapter, MemoryVaultAdapter


@pytest.fixture
def settings_manager(vault_dir):
    return SettingsManager(vault_dir)


@pytest.fixture
def configured(settings_manager, target_dir):
    """写入一份完整配置"""
    settings_manager.save_settings({
        "symlinkTarget": str(target_dir),
        "symlinkPath": "link",
    })
    return settings_manager


def start(settings_manager, vault, notifier, status_surface=None):
    return asyncio.run(plugin.start(settings_manager, vault, notifier, status_surface))


class TestPluginStart:
    """启动流程测试"""

    def test_start_renders_clear(self, configured, vault_dir, notifier, status_surface):
        """测试启动时渲染 clear"""
        handle = start(configured, FileSystemVaultAdapter(vault_dir), notifier, status_surface)

        assert handle.active is True
        assert handle.status.present is False
        assert status_surface.text == LABEL_CLEAR
        assert notifier.notices == []
        assert handle.status_error is None

    def test_start_renders_present(self, configured, vault_dir, target_dir, notifier, status_surface):
        """测试链接已存在时渲染 present"""
        os.symlink(str(target_dir), str(vault_dir / "link"))

        start(configured, FileSystemVaultAdapter(vault_dir), notifier, status_surface)

        assert status_surface.text == LABEL_PRESENT

    def test_start_with_default_settings(self, settings_manager, vault_dir, notifier, status_surface):
        """测试未配置路径时启动不报错，状态未知"""
        handle = start(settings_manager, FileSystemVaultAdapter(vault_dir), notifier, status_surface)

        assert handle.status.present is None
        assert status_surface.history == []
        assert handle.settings == ToggleSettings()
        assert isinstance(handle.status_error, ConfigurationError)

    def test_start_with_memory_vault(self, configured, notifier, status_surface):
        """测试非文件系统 vault 启动后状态未知"""
        handle = start(configured, MemoryVaultAdapter(), notifier, status_surface)

        assert handle.status.present is None

    def test_start_keeps_query_error(self, configured, vault_dir, notifier, status_surface):
        """测试启动时的查询错误保存在句柄上，状态栏不变"""
        error = SymlinkQueryError("Error: Input/output error")
        with patch("symlink_toggle.core.toggle_controller.check_exists", side_effect=error):
            handle = start(configured, FileSystemVaultAdapter(vault_dir), notifier, status_surface)

        assert handle.status_error is error
        assert status_surface.history == []
        assert notifier.notices == []

    def test_refresh_clears_previous_error(self, settings_manager, vault_dir, notifier):
        """测试配置修复后刷新状态会清除之前的错误"""
        handle = start(settings_manager, FileSystemVaultAdapter(vault_dir), notifier)
        settings_manager.update("symlinkPath", "link")

        assert asyncio.run(handle.refresh_status()) is False
        assert handle.status_error is None

    def test_start_with_broken_settings(self, settings_manager, vault_dir, notifier):
        """测试配置文件损坏时启动失败"""
        settings_manager.config_path.write_text("symlinkPath: [", encoding="utf-8")

        with pytest.raises(ConfigParseError):
            start(settings_manager, FileSystemVaultAdapter(vault_dir), notifier)


class TestPluginTrigger:
    """触发与停止测试"""

    def test_trigger_uses_current_settings(self, configured, vault_dir, target_dir, notifier, status_surface):
        """测试触发使用最新配置"""
        handle = start(configured, FileSystemVaultAdapter(vault_dir), notifier, status_surface)
        configured.update("symlinkPath", "other")

        asyncio.run(handle.trigger())

        assert (vault_dir / "other").is_symlink()
        assert not os.path.lexists(str(vault_dir / "link"))
        assert status_surface.text == LABEL_PRESENT

    def test_trigger_after_stop_is_ignored(self, configured, vault_dir, notifier):
        """测试停止后触发无效"""
        handle = start(configured, FileSystemVaultAdapter(vault_dir), notifier)
        plugin.stop(handle)

        asyncio.run(handle.trigger())

        assert handle.active is False
        assert notifier.notices == []
        assert not os.path.lexists(str(vault_dir / "link"))

    def test_trigger_reports_configuration_error(self, settings_manager, vault_dir, notifier):
        """测试未配置路径时触发报告错误"""
        handle = start(settings_manager, FileSystemVaultAdapter(vault_dir), notifier)

        asyncio.run(handle.trigger())

        assert len(notifier.errors) == 1


class TestSettingsSchema:
    """设置面板描述测试"""

    def test_schema_fields(self, settings_manager):
        """测试字段名称和文本"""
        fields = plugin.build_settings_schema(settings_manager)

        assert [f.name for f in fields] == ["symlinkTarget", "symlinkPath"]
        assert [f.label for f in fields] == ["Symlink target", "Symlink path"]
        assert all(isinstance(f, SettingField) and f.description for f in fields)

    def test_on_change_persists(self, settings_manager, vault_dir):
        """测试编辑字段立即持久化"""
        fields = {f.name: f for f in plugin.build_settings_schema(settings_manager)}

        fields["symlinkTarget"].change("/data/real")
        fields["symlinkPath"].change("link")

        assert SettingsManager(vault_dir).load_settings() == {
            "symlinkTarget": "/data/real",
            "symlinkPath": "link",
        }

    def test_field_without_callback(self):
        """测试没有回调的字段"""
        SettingField(name="x", label="X", description="").change("value")


class TestToggleSettings:
    """ToggleSettings 测试"""

    def test_round_trip(self):
        data = {"symlinkTarget": "/data/real", "symlinkPath": "link"}

        assert ToggleSettings.from_dict(data).to_dict() == data

    def test_missing_keys_default_to_empty(self):
        assert ToggleSettings.from_dict({}) == ToggleSettings("", "")

"""结构化日志系统的单元测试"""

import logging
import tempfile
from pathlib import Path

import pytest

from symlink_toggle.core import logger as logger_module
from symlink_toggle.core.logger import (
    Logger,
    LoggerConfig,
    OperationScope,
    configure_logger,
    get_logger,
    _operation_id,
)


@pytest.fixture(autouse=True)
def restore_default_logger():
    """测试结束后恢复全局记录器"""
    saved = logger_module._default_logger
    yield
    logger_module._default_logger = saved
    Logger.clear_context()
    root = logging.getLogger()
    root.setLevel(logging.WARNING)
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            handler.close()
            root.removeHandler(handler)


class TestLoggerConfig:
    """测试 LoggerConfig 类"""

    def test_default_config(self):
        config = LoggerConfig()

        assert config.log_dir is None
        assert config.level == "INFO"
        assert config.json_output is False
        assert config.console_output is False

    def test_custom_config(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config = LoggerConfig(log_dir=Path(tmpdir), level="DEBUG", json_output=True)

            assert config.log_dir == Path(tmpdir)
            assert config.level == "DEBUG"
            assert config.json_output is True


class TestLogger:
    """测试 Logger 类"""

    def test_logger_methods(self):
        """测试各级别日志不抛异常"""
        log = Logger("test")

        log.debug("debug_event", key="value")
        log.info("info_event", key="value")
        log.warning("warning_event", key="value")
        log.error("error_event", key="value")

    def test_bind_returns_new_logger(self):
        log = Logger("test")
        bound = log.bind(component="toggle")

        assert bound is not log
        assert bound.name == "test"

    def test_log_file_created(self, monkeypatch):
        """测试配置日志目录时写入日志文件"""
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        with tempfile.TemporaryDirectory() as tmpdir:
            log = Logger("test", LoggerConfig(log_dir=Path(tmpdir), level="DEBUG"))
            log.info("file_event")

            assert (Path(tmpdir) / Logger.LOG_FILENAME).exists()
            assert len(root.handlers) == 1
            root.handlers[0].close()

    def test_repeated_configuration_does_not_stack_handlers(self, monkeypatch):
        """测试多次配置控制台输出不会叠加处理器"""
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])

        configure_logger(LoggerConfig(level="DEBUG", console_output=True))
        configure_logger(LoggerConfig(level="DEBUG", console_output=True))

        assert len(root.handlers) == 1


class TestGlobalLogger:
    """测试全局记录器"""

    def test_get_logger_is_singleton(self):
        assert get_logger("a") is get_logger("b")

    def test_configure_logger_replaces_default(self):
        old = get_logger()
        new = configure_logger(LoggerConfig(level="DEBUG"))

        assert new is not old
        assert get_logger() is new
        assert new.config.level == "DEBUG"


class TestOperationScope:
    """测试操作范围"""

    def test_success(self):
        with OperationScope("test_op", {"path": "/tmp/link"}) as scope:
            assert _operation_id.get() == scope.operation_id

        assert scope.status == "success"
        assert scope.duration_ms is not None
        assert _operation_id.get() == ""

    def test_failure_propagates(self):
        with pytest.raises(RuntimeError):
            with OperationScope("test_op") as scope:
                raise RuntimeError("boom")

        assert scope.status == "failure"
        assert _operation_id.get() == ""

    def test_nested_scope_restores_outer_id(self):
        with OperationScope("outer") as outer:
            with OperationScope("inner") as inner:
                assert _operation_id.get() == inner.operation_id
            assert _operation_id.get() == outer.operation_id

"""结构化日志系统

基于 structlog 的日志记录器，为每次切换操作附带 operation_id 便于追踪。"""

import copy
import logging
import time
import contextvars
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pathlib import Path

import structlog


# 当前操作的链路 ID
_operation_id: contextvars.ContextVar[str] = contextvars.ContextVar(
    'operation_id', default=""
)


class LoggerConfig:
    """日志配置类"""

    def __init__(
        self,
        log_dir: Optional[Path] = None,
        level: str = "INFO",
        json_output: bool = False,
        console_output: bool = False,
    ):
        """初始化日志配置
        Args:
            log_dir: 日志目录，如果为 None 则不写入文件
            level: 日志级别 (DEBUG, INFO, WARNING, ERROR)
            json_output: 是否输出 JSON 格式
            console_output: 是否输出到控制台（stderr）
        """
        self.log_dir = log_dir
        self.level = level
        self.json_output = json_output
        self.console_output = console_output


class Logger:
    """结构化日志记录器"""

    LOG_FILENAME = "symlink-toggle.log"

    def __init__(self, name: str = "symlink_toggle", config: Optional[LoggerConfig] = None):
        self.name = name
        self.config = config or LoggerConfig()
        self._setup_structlog()
        self.logger = structlog.get_logger(name)

    def _setup_structlog(self) -> None:
        """配置 structlog 与标准库 logging 的处理器"""
        handlers = []

        if self.config.console_output:
            handlers.append(logging.StreamHandler())

        if self.config.log_dir:
            log_dir = Path(self.config.log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_dir / self.LOG_FILENAME))

        # root 已有处理器时 basicConfig 不做任何事，重复配置不会叠加处理器
        if handlers:
            logging.basicConfig(
                handlers=handlers,
                level=getattr(logging, self.config.level, logging.INFO),
                format="%(message)s",
            )

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                structlog.processors.JSONRenderer()
                if self.config.json_output
                else structlog.dev.ConsoleRenderer(colors=False),
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

    def debug(self, event: str, **kwargs) -> None:
        self._log("debug", event, **kwargs)

    def info(self, event: str, **kwargs) -> None:
        self._log("info", event, **kwargs)

    def warning(self, event: str, **kwargs) -> None:
        self._log("warning", event, **kwargs)

    def error(self, event: str, **kwargs) -> None:
        self._log("error", event, **kwargs)

    def bind(self, **kwargs) -> 'Logger':
        """返回绑定了额外上下文的新记录器"""
        new_logger = copy.copy(self)
        new_logger.logger = self.logger.bind(**kwargs)
        return new_logger

    def _log(self, level: str, event: str, **kwargs) -> None:
        context = {}
        operation_id = _operation_id.get()
        if operation_id:
            context['operation_id'] = operation_id
        context.update(kwargs)

        getattr(self.logger, level)(event, **context)

    @staticmethod
    def clear_context() -> None:
        _operation_id.set("")


class OperationScope:
    """操作范围上下文管理器

    记录操作的开始、结束（含耗时）和异常，异常继续向外传播。

    Example:
        with OperationScope("symlink_toggle", {"path": path}):
            ...
    """

    def __init__(
        self,
        operation_name: str,
        context: Optional[Dict[str, Any]] = None,
        logger: Optional[Logger] = None,
        operation_id: Optional[str] = None,
    ):
        self.operation_name = operation_name
        self.context = context or {}
        self.logger = logger or get_logger()
        self.operation_id = operation_id or str(uuid.uuid4())
        self.status: Optional[str] = None
        self.duration_ms: Optional[int] = None
        self._start_time = 0.0
        self._token = None

    def __enter__(self) -> 'OperationScope':
        self._token = _operation_id.set(self.operation_id)
        self._start_time = time.time()
        self.status = "running"
        self.logger.info(
            f"{self.operation_name}_started",
            started_at=datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            **self.context
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.duration_ms = int((time.time() - self._start_time) * 1000)

        if exc_type is not None:
            self.status = "failure"
            self.logger.error(
                f"{self.operation_name}_failed",
                duration_ms=self.duration_ms,
                error_type=exc_type.__name__,
                error_message=str(exc_val),
                **self.context
            )
        else:
            self.status = "success"
            self.logger.info(
                f"{self.operation_name}_succeeded",
                duration_ms=self.duration_ms,
                **self.context
            )

        # 恢复外层操作的 ID
        _operation_id.reset(self._token)
        return False


# 全局默认记录器实例
_default_logger: Optional[Logger] = None


def get_logger(
    name: str = "symlink_toggle",
    config: Optional[LoggerConfig] = None,
) -> Logger:
    """获取日志记录器实例

    已存在全局记录器时直接返回，不会被新配置覆盖。
    """
    global _default_logger

    if _default_logger is not None:
        return _default_logger

    _default_logger = Logger(name, config)

    return _default_logger


def configure_logger(config: LoggerConfig) -> Logger:
    """使用新配置替换全局日志记录器"""
    global _default_logger
    _default_logger = Logger("symlink_toggle", config)
    return _default_logger

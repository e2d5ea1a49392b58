"""MySQL 磁盘巡检的结构化日志配置与辅助函数.

插件约定 stdout 只输出一行检查结果,因此所有日志经标准库 logging 写入 stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO, cast

import structlog

from mysql_disk_check import __version__
from mysql_disk_check.constants.system_constants import CHECK_NAME, DEFAULT_LOG_LEVEL
from mysql_disk_check.types.structures import JsonValue, LoggerExtra, StructlogEventDict

if TYPE_CHECKING:
    from structlog.typing import BindableLogger, Processor

LogField = JsonValue | LoggerExtra


class StderrHandler(logging.StreamHandler):
    """写入当前 ``sys.stderr`` 的 handler,未显式指定输出流时每次输出都重新取值."""

    def __init__(self) -> None:
        super().__init__()
        self._fixed_stream: TextIO | None = None

    @property
    def stream(self) -> TextIO:
        return sys.stderr if self._fixed_stream is None else self._fixed_stream

    @stream.setter
    def stream(self, value: TextIO | None) -> None:
        self._fixed_stream = None if value is sys.stderr else value


class StructlogConfig:
    """structlog 配置核心类.

    负责配置处理器链与标准库 handler,可重复调用以调整日志级别.

    Attributes:
        level: 当前生效的日志级别名称.
        configured: 是否已配置标志.

    Example:
        >>> config = StructlogConfig()
        >>> config.configure("DEBUG")
        >>> logger = get_logger('my_module')

    """

    def __init__(self) -> None:
        self.level = DEFAULT_LOG_LEVEL
        self.handler = StderrHandler()
        self.handler.setFormatter(logging.Formatter("%(message)s"))
        self.configured = False

    def configure(self, level: str | None = None, stream: TextIO | None = None) -> None:
        """初始化 structlog 处理器.

        首次调用时配置处理器链;之后的调用只调整日志级别与输出流.

        Args:
            level: 日志级别名称,缺省沿用当前级别.
            stream: 日志输出流,默认 stderr.

        Returns:
            None.

        """
        if level:
            self.level = level.upper()
        target = stream or sys.stderr

        if not self.configured:
            processors = [
                structlog.stdlib.filter_by_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.stdlib.add_log_level,
                structlog.stdlib.add_logger_name,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                self._add_global_context,
                self._get_renderer(target),
            ]
            structlog.configure(
                processors=cast("list[structlog.types.Processor]", processors),
                context_class=dict,
                logger_factory=structlog.stdlib.LoggerFactory(),
                wrapper_class=structlog.stdlib.BoundLogger,
                cache_logger_on_first_use=True,
            )
            self.configured = True

        if stream is not None:
            self.handler.setStream(stream)
        root = logging.getLogger()
        if self.handler not in root.handlers:
            root.addHandler(self.handler)
        root.setLevel(getattr(logging, self.level, logging.WARNING))

    @staticmethod
    def _add_global_context(
        _logger: BindableLogger,
        _method_name: str,
        event_dict: StructlogEventDict,
    ) -> StructlogEventDict:
        """附加插件名称与版本."""
        event_dict["app_name"] = CHECK_NAME
        event_dict["app_version"] = __version__
        return event_dict

    @staticmethod
    def _get_renderer(stream: TextIO) -> Processor:
        """根据终端能力返回渲染器.

        Returns:
            交互终端使用彩色控制台渲染,否则输出 JSON 便于采集.

        """
        if stream.isatty():
            return structlog.dev.ConsoleRenderer(colors=True)
        return structlog.processors.JSONRenderer()


structlog_config = StructlogConfig()


def configure_logging(level: str | None = None) -> None:
    """按给定级别配置日志.

    Args:
        level: 日志级别名称,如 ``DEBUG``.

    Returns:
        None.

    """
    structlog_config.configure(level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """获取结构化日志记录器.

    Args:
        name: 日志记录器名称,通常使用模块名.

    Returns:
        绑定的 structlog 日志记录器实例.

    """
    if not structlog_config.configured:
        structlog_config.configure()
    return structlog.get_logger(name)


def get_system_logger() -> structlog.stdlib.BoundLogger:
    """返回系统级 logger."""
    return get_logger("system")


def get_db_logger() -> structlog.stdlib.BoundLogger:
    """返回数据库操作 logger."""
    return get_logger("database")


def log_info(message: str, module: str = "check", **kwargs: LogField) -> None:
    """记录信息级别日志.

    Example:
        >>> log_info('凭据文件已加载', module='config', path='/etc/my.cnf')

    """
    get_logger("app").info(message, module=module, **kwargs)


__all__ = [
    "StructlogConfig",
    "configure_logging",
    "get_db_logger",
    "get_logger",
    "get_system_logger",
    "log_info",
    "structlog_config",
]

"""MySQL 磁盘巡检 - 统一异常定义.

说明:
- 本模块只负责定义异常类型与语义字段.
- 异常到检查结果(OK/WARNING/CRITICAL/UNKNOWN)的映射通过类属性 ``status`` 声明,
  由巡检服务在单一出口统一转换.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mysql_disk_check.constants.system_constants import CheckStatus, ErrorCategory, ErrorMessages, ErrorSeverity

if TYPE_CHECKING:
    from mysql_disk_check.types.structures import LoggerExtra


@dataclass(frozen=True, slots=True)
class ExceptionMetadata:
    """异常的元信息."""

    category: ErrorCategory
    severity: ErrorSeverity
    default_message_key: str
    status: CheckStatus


class AppError(Exception):
    """统一的基础业务异常.

    Args:
        message: 自定义错误文案,若为空则根据 ``message_key`` 推导.
        message_key: 自定义消息键.
        extra: 结构化日志附加字段.
        severity: 错误严重度.
        category: 错误分类.
    """

    metadata = ExceptionMetadata(
        category=ErrorCategory.SYSTEM,
        severity=ErrorSeverity.HIGH,
        default_message_key="INTERNAL_ERROR",
        status=CheckStatus.CRITICAL,
    )

    def __init__(
        self,
        message: str | None = None,
        *,
        message_key: str | None = None,
        extra: LoggerExtra | None = None,
        severity: ErrorSeverity | None = None,
        category: ErrorCategory | None = None,
    ) -> None:
        """初始化基础业务异常.

        Args:
            message: 直接使用的错误提示,缺省时会根据 message_key 推导.
            message_key: 覆盖默认 message_key 的可选值.
            extra: 结构化日志附加字段.
            severity: 错误严重度.
            category: 错误分类.
        """
        self.message_key = message_key or self.metadata.default_message_key
        self.message = message or getattr(ErrorMessages, self.message_key, ErrorMessages.INTERNAL_ERROR)
        self.extra = dict(extra or {})
        self.severity = severity or self.metadata.severity
        self.category = category or self.metadata.category
        super().__init__(self.message)

    @property
    def status(self) -> CheckStatus:
        """返回该异常对应的检查结果."""

        return self.metadata.status


class ConfigError(AppError):
    """表示参数缺失、取值非法或凭据文件不可读."""

    metadata = ExceptionMetadata(
        category=ErrorCategory.VALIDATION,
        severity=ErrorSeverity.LOW,
        default_message_key="MISSING_REQUIRED_OPTIONS",
        status=CheckStatus.UNKNOWN,
    )


class DriverError(AppError):
    """驱动层错误基类,携带错误码、错误信息与 SQLSTATE.

    Args:
        code: 驱动返回的错误码,未知时为 None.
        driver_message: 驱动返回的错误信息.
        sqlstate: 标准 SQLSTATE,驱动未提供时为 None.
    """

    metadata = ExceptionMetadata(
        category=ErrorCategory.DATABASE,
        severity=ErrorSeverity.HIGH,
        default_message_key="DATABASE_QUERY_ERROR",
        status=CheckStatus.CRITICAL,
    )

    def __init__(
        self,
        code: int | None,
        driver_message: str,
        sqlstate: str | None = None,
        *,
        extra: LoggerExtra | None = None,
    ) -> None:
        self.code = code
        self.driver_message = driver_message
        self.sqlstate = sqlstate
        message = ErrorMessages.DRIVER_ERROR.format(code=code, message=driver_message)
        if sqlstate:
            message += ErrorMessages.DRIVER_SQLSTATE_SUFFIX.format(state=sqlstate)
        payload = {"error_code": code, "sqlstate": sqlstate}
        payload.update(extra or {})
        super().__init__(message, extra=payload)

    @classmethod
    def from_driver_exception(cls, exc: BaseException) -> DriverError:
        """由驱动异常构造,兼容 ``(errno, message)`` 与单参数两种形态.

        Args:
            exc: 驱动抛出的原始异常.

        Returns:
            DriverError: 对应子类实例.

        """
        args = getattr(exc, "args", ())
        code: int | None = None
        driver_message = str(exc)
        if args and isinstance(args[0], int):
            code = args[0]
            driver_message = str(args[1]) if len(args) > 1 else ""
        elif len(args) == 1:
            driver_message = str(args[0])
        sqlstate = getattr(exc, "sqlstate", None)
        return cls(code, driver_message, sqlstate if isinstance(sqlstate, str) else None)


class DatabaseConnectionError(DriverError):
    """表示无法建立数据库连接(网络、认证等)."""

    metadata = ExceptionMetadata(
        category=ErrorCategory.DATABASE,
        severity=ErrorSeverity.CRITICAL,
        default_message_key="DATABASE_CONNECTION_ERROR",
        status=CheckStatus.CRITICAL,
    )


class QueryError(DriverError):
    """表示容量汇总查询执行失败."""


class UnexpectedError(AppError):
    """表示系统级未知错误,例如容量字段无法解析为数值."""


__all__ = [
    "AppError",
    "ConfigError",
    "DatabaseConnectionError",
    "DriverError",
    "QueryError",
    "UnexpectedError",
]

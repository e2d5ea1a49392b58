"""常量模块。

主要常量：
- CheckStatus: 监控插件状态与退出码
- ErrorCategory / ErrorSeverity: 错误分类与严重度
- ErrorMessages / UsageMessages: 输出文案
"""

from .system_constants import (
    BYTES_PER_GIB,
    CHECK_NAME,
    DEFAULT_CRITICAL_PERCENT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MYSQL_PORT,
    DEFAULT_WARNING_PERCENT,
    CheckStatus,
    ErrorCategory,
    ErrorMessages,
    ErrorSeverity,
    LogLevel,
    UsageMessages,
)

__all__ = [
    "BYTES_PER_GIB",
    "CHECK_NAME",
    "DEFAULT_CRITICAL_PERCENT",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_MYSQL_PORT",
    "DEFAULT_WARNING_PERCENT",
    "CheckStatus",
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "LogLevel",
    "UsageMessages",
]

"""MySQL 磁盘巡检 - 常量定义模块

统一管理检查状态、错误分类与输出文案.
"""

from enum import Enum, IntEnum

CHECK_NAME = "CheckMysqlDisk"

DEFAULT_MYSQL_PORT = 3306
DEFAULT_WARNING_PERCENT = 85.0
DEFAULT_CRITICAL_PERCENT = 95.0
DEFAULT_LOG_LEVEL = "WARNING"

BYTES_PER_GIB = 1024 * 1024 * 1024


class CheckStatus(IntEnum):
    """监控插件四态结果,取值即进程退出码."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


class LogLevel(Enum):
    """日志级别枚举."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ErrorCategory(Enum):
    """错误分类枚举."""

    VALIDATION = "validation"
    DATABASE = "database"
    SYSTEM = "system"


class ErrorSeverity(Enum):
    """错误严重程度枚举."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# 输出文案,监控系统按原文匹配,不做本地化
class ErrorMessages:
    """错误消息常量."""

    MISSING_REQUIRED_OPTIONS = "Must specify host, user, password and size"
    INVALID_SIZE = "Size must be greater than zero"
    INVALID_OPTIONS = "Invalid options: {detail}"
    CREDENTIALS_FILE_NOT_FOUND = "Credentials file not found: {path}"
    CREDENTIALS_FILE_UNREADABLE = "Unable to parse credentials file {path}: {detail}"
    CREDENTIALS_SECTION_MISSING = "Credentials file {path} has no [{section}] section"
    CREDENTIALS_KEY_MISSING = "Credentials file {path} is missing '{key}' in [{section}]"
    DRIVER_ERROR = "Error code: {code} Error message: {message}"
    DRIVER_SQLSTATE_SUFFIX = " SQLSTATE: {state}"
    DATABASE_CONNECTION_ERROR = "Unable to connect to database"
    DATABASE_QUERY_ERROR = "Database query failed"
    INTERNAL_ERROR = "Unexpected error"


class UsageMessages:
    """容量判定文案."""

    DISK_USAGE = "DB size: {total:.2f}, disk use: {percent:.2f}%"
    CRITICAL_EXCEEDED = "Database size exceeds critical threshold: {diskstr}"
    WARNING_EXCEEDED = "Database size exceeds warning threshold: {diskstr}"

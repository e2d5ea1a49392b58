"""数据库连接适配器."""

from .base import DatabaseConnection, QueryResult, QueryResultRow
from .mysql_adapter import MYSQL_DRIVER_EXCEPTIONS, MySQLConnection

__all__ = [
    "MYSQL_DRIVER_EXCEPTIONS",
    "DatabaseConnection",
    "MySQLConnection",
    "QueryResult",
    "QueryResultRow",
]

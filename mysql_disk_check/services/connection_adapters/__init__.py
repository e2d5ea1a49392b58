"""数据库连接模块."""

from .adapters import DatabaseConnection, MySQLConnection

__all__ = ["DatabaseConnection", "MySQLConnection"]

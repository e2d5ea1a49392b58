"""MySQL 数据库连接适配器."""

from __future__ import annotations

from typing import cast

import pymysql

from mysql_disk_check.core.exceptions import DatabaseConnectionError, QueryError
from mysql_disk_check.types.dbapi import DriverConnection

from .base import DatabaseConnection, QueryResult

MYSQL_DRIVER_EXCEPTIONS: tuple[type[BaseException], ...] = (pymysql.MySQLError,)


class MySQLConnection(DatabaseConnection):
    """MySQL 数据库连接.

    不选择默认 database,超时沿用驱动默认值.
    """

    def connect(self) -> None:
        """建立 MySQL 连接并缓存连接对象.

        Raises:
            DatabaseConnectionError: 驱动报错(网络、认证等)时抛出,携带错误码与信息.

        """
        if self.is_connected:
            return
        try:
            self.connection = pymysql.connect(
                host=self.params.host,
                port=self.params.port,
                user=self.params.user,
                password=self.params.password,
                unix_socket=self.params.socket,
                database=None,
                charset="utf8mb4",
                autocommit=True,
            )
        except MYSQL_DRIVER_EXCEPTIONS as exc:
            error = DatabaseConnectionError.from_driver_exception(exc)
            self.db_logger.info(
                "mysql_connect_failed",
                module="connection",
                host=self.params.host,
                port=self.params.port,
                socket=self.params.socket,
                error_code=error.code,
                error=error.driver_message,
            )
            raise error from exc
        self.is_connected = True

    def disconnect(self) -> None:
        """关闭当前连接并复位状态标识.

        Returns:
            None

        """
        if self.connection is None:
            return
        conn = cast(DriverConnection, self.connection)
        try:
            conn.close()
        except MYSQL_DRIVER_EXCEPTIONS as exc:
            self.db_logger.info(
                "mysql_disconnect_failed",
                module="connection",
                host=self.params.host,
                error=str(exc),
                exc_info=True,
            )
        finally:
            self.connection = None
            self.is_connected = False

    def execute_query(self, query: str) -> QueryResult:
        """执行 SQL 查询并返回全部结果.

        Args:
            query: 待执行的 SQL 语句,不带绑定参数.

        Returns:
            QueryResult: pymysql `fetchall` 的结果.

        Raises:
            QueryError: 驱动执行失败时抛出.

        """
        if not self.is_connected:
            self.connect()

        conn = cast(DriverConnection, self.connection)
        try:
            cursor = conn.cursor()
        except MYSQL_DRIVER_EXCEPTIONS as exc:
            raise QueryError.from_driver_exception(exc) from exc
        try:
            cursor.execute(query)
            return list(cursor.fetchall() or [])
        except MYSQL_DRIVER_EXCEPTIONS as exc:
            raise QueryError.from_driver_exception(exc) from exc
        finally:
            cursor.close()

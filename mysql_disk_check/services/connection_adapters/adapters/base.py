"""数据库连接基类与公共类型."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TypeAlias

from mysql_disk_check.types.dbapi import DriverRow
from mysql_disk_check.utils.structlog_config import get_db_logger

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from mysql_disk_check.types.disk_usage import ConnectionParams

QueryResultRow: TypeAlias = DriverRow
QueryResult: TypeAlias = list[QueryResultRow]


class DatabaseConnection(ABC):
    """数据库连接抽象基类.

    支持 ``with`` 语句: 进入时建立连接,退出时(含异常路径)释放连接.
    """

    def __init__(self, params: ConnectionParams) -> None:
        self.params = params
        self.db_logger = get_db_logger()
        self.connection: object | None = None
        self.is_connected = False

    def __enter__(self) -> Self:
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.disconnect()

    @abstractmethod
    def connect(self) -> None:
        """建立数据库连接,失败时抛出 DatabaseConnectionError."""

    @abstractmethod
    def disconnect(self) -> None:
        """断开数据库连接,重复调用无副作用."""

    @abstractmethod
    def execute_query(self, query: str) -> QueryResult:
        """执行查询并返回结果,失败时抛出 QueryError."""

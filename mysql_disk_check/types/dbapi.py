"""巡检用到的 pymysql 连接与游标的最小接口.

只描述 ``MySQLConnection`` 实际调用的方法: 取游标、执行无参数汇总查询、读取全部行、关闭.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .structures import JsonValue

DriverRow = Sequence[JsonValue]


class DriverCursor(Protocol):
    """汇总查询游标."""

    def execute(self, query: str) -> int: ...

    def fetchall(self) -> Sequence[DriverRow] | None: ...

    def close(self) -> None: ...


class DriverConnection(Protocol):
    """``pymysql.connect`` 返回的连接对象."""

    def cursor(self) -> DriverCursor: ...

    def close(self) -> None: ...


__all__ = ["DriverConnection", "DriverCursor", "DriverRow"]

# tests/unit/conftest.py
"""单元测试专用 fixtures.

提供假驱动与常用 monkeypatch,单元测试不连接真实 MySQL.
"""

from __future__ import annotations

import os
from typing import Any

import pytest

from mysql_disk_check.constants.system_constants import DEFAULT_LOG_LEVEL
from mysql_disk_check.utils.structlog_config import structlog_config


class FakeCursor:
    def __init__(self, connection: "FakeDriverConnection") -> None:
        self._connection = connection
        self.closed = False

    def execute(self, query: str) -> int:
        self._connection.executed.append(query)
        if self._connection.query_error is not None:
            raise self._connection.query_error
        return len(self._connection.rows)

    def fetchall(self) -> tuple[tuple[Any, ...], ...]:
        return tuple(self._connection.rows)

    def close(self) -> None:
        self.closed = True


class FakeDriverConnection:
    """模拟 pymysql 连接,记录 close 次数."""

    def __init__(self, rows: list[tuple[Any, ...]] | None = None, query_error: Exception | None = None) -> None:
        self.rows = list(rows or [])
        self.query_error = query_error
        self.executed: list[str] = []
        self.close_calls = 0
        self.cursors: list[FakeCursor] = []

    def cursor(self) -> FakeCursor:
        cursor = FakeCursor(self)
        self.cursors.append(cursor)
        return cursor

    def close(self) -> None:
        self.close_calls += 1


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """为 unit tests 清理 MYSQL_DISK_* 环境变量,并在结束后恢复默认日志级别."""
    for name in list(os.environ):
        if name.startswith("MYSQL_DISK_"):
            monkeypatch.delenv(name, raising=False)
    yield
    structlog_config.configure(DEFAULT_LOG_LEVEL)


@pytest.fixture
def fake_driver(monkeypatch):
    """替换 pymysql.connect,返回可配置的假连接.

    用法: ``state = fake_driver(rows=[...])``,调用后 ``state["connection"]`` 为最近一次连接,
    ``state["connect_kwargs"]`` 为最近一次连接参数.
    """
    from mysql_disk_check.services.connection_adapters.adapters import mysql_adapter

    state: dict[str, Any] = {"connection": None, "connect_kwargs": None, "connect_calls": 0}

    def _install(
        rows: list[tuple[Any, ...]] | None = None,
        *,
        connect_error: Exception | None = None,
        query_error: Exception | None = None,
    ) -> dict[str, Any]:
        def _connect(**kwargs: Any) -> FakeDriverConnection:
            state["connect_calls"] += 1
            state["connect_kwargs"] = kwargs
            if connect_error is not None:
                raise connect_error
            connection = FakeDriverConnection(rows, query_error)
            state["connection"] = connection
            return connection

        monkeypatch.setattr(mysql_adapter.pymysql, "connect", _connect)
        return state

    return _install


@pytest.fixture
def usage_row():
    """构造一行汇总查询结果,列顺序与 SCHEMA_USAGE_QUERY 一致."""

    def _build(schema: str, total_gb: float, *, index_gb: float = 0.0) -> tuple[Any, ...]:
        data_gb = total_gb - index_gb
        fraction = round(index_gb / data_gb, 2) if data_gb else None
        return (schema, 3, "0.01M", data_gb, index_gb, total_gb, fraction)

    return _build

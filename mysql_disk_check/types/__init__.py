"""共享类型定义."""

from .dbapi import DriverConnection, DriverCursor, DriverRow
from .disk_usage import ConnectionParams, SchemaUsageRow, Thresholds, UsageReport, Verdict
from .structures import JsonValue, LoggerExtra, StructlogEventDict

__all__ = [
    "ConnectionParams",
    "DriverConnection",
    "DriverCursor",
    "DriverRow",
    "JsonValue",
    "LoggerExtra",
    "SchemaUsageRow",
    "StructlogEventDict",
    "Thresholds",
    "UsageReport",
    "Verdict",
]

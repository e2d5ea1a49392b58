"""MySQL schema 容量汇总适配器."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Final

from mysql_disk_check.constants.system_constants import BYTES_PER_GIB
from mysql_disk_check.types.disk_usage import SchemaUsageRow, UsageReport
from mysql_disk_check.utils.structlog_config import get_db_logger

if TYPE_CHECKING:
    from mysql_disk_check.services.connection_adapters.adapters.base import DatabaseConnection, QueryResultRow

SCHEMA_USAGE_QUERY: Final[str] = f"""
    SELECT
        table_schema,
        COUNT(*) AS table_count,
        CONCAT(ROUND(SUM(table_rows) / 1000000, 2), 'M') AS row_estimate,
        ROUND(SUM(data_length) / {BYTES_PER_GIB}, 2) AS data_gb,
        ROUND(SUM(index_length) / {BYTES_PER_GIB}, 2) AS index_gb,
        ROUND(SUM(data_length + index_length) / {BYTES_PER_GIB}, 2) AS total_gb,
        ROUND(SUM(index_length) / SUM(data_length), 2) AS index_fraction
    FROM information_schema.TABLES
    GROUP BY table_schema
"""

_EXPECTED_COLUMNS: Final[int] = 7


class MySQLSchemaUsageAdapter:
    """MySQL schema 容量汇总适配器.

    通过 information_schema.TABLES 按 schema 汇总数据、索引与总容量(GiB).
    """

    def __init__(self) -> None:
        self.logger = get_db_logger()

    def fetch_schema_usage(self, connection: DatabaseConnection) -> UsageReport:
        """执行汇总查询并构造容量报告.

        Args:
            connection: 已建立的数据库连接.

        Returns:
            UsageReport: 各 schema 汇总行,查询无结果时为空报告.

        Raises:
            ValueError: 容量字段不是合法数值时抛出.

        """
        result = connection.execute_query(SCHEMA_USAGE_QUERY)
        schemas = tuple(self._parse_row(row) for row in result or [] if row)
        report = UsageReport(schemas=schemas)

        for row in schemas:
            self.logger.debug(
                "mysql_schema_usage_row",
                table_schema=row.table_schema,
                table_count=row.table_count,
                row_estimate=row.row_estimate,
                data_gb=row.data_gb,
                index_gb=row.index_gb,
                total_gb=row.total_gb,
                index_fraction=row.index_fraction,
            )
        self.logger.info(
            "mysql_schema_usage_collected",
            schema_count=len(schemas),
            total_used_gb=report.total_used_gb,
        )
        return report

    @classmethod
    def _parse_row(cls, row: QueryResultRow) -> SchemaUsageRow:
        if len(row) < _EXPECTED_COLUMNS:
            msg = f"unexpected schema usage row with {len(row)} columns"
            raise ValueError(msg)
        return SchemaUsageRow(
            table_schema=str(row[0]).strip() if row[0] is not None else "",
            table_count=int(cls._to_float(row[1])),
            row_estimate=str(row[2]) if row[2] is not None else None,
            data_gb=cls._to_float(row[3]),
            index_gb=cls._to_float(row[4]),
            total_gb=cls._to_float(row[5]),
            index_fraction=None if row[6] is None else cls._to_float(row[6]),
        )

    @staticmethod
    def _to_float(value: object) -> float:
        """将驱动返回值转换为浮点数,NULL 视为 0.0."""
        if value is None:
            return 0.0
        if isinstance(value, bool):
            msg = f"invalid numeric value: {value!r}"
            raise ValueError(msg)
        if isinstance(value, (int, float, Decimal)):
            return float(value)
        if isinstance(value, (bytes, bytearray)):
            value = value.decode()
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                msg = f"invalid numeric value: {value!r}"
                raise ValueError(msg) from None
        msg = f"invalid numeric value: {value!r}"
        raise ValueError(msg)

"""磁盘容量巡检相关类型定义."""

from __future__ import annotations

from dataclasses import dataclass, field

from mysql_disk_check.constants.system_constants import (
    CHECK_NAME,
    DEFAULT_CRITICAL_PERCENT,
    DEFAULT_MYSQL_PORT,
    DEFAULT_WARNING_PERCENT,
    CheckStatus,
)


@dataclass(frozen=True, slots=True)
class ConnectionParams:
    """已解析的连接参数."""

    host: str
    user: str
    password: str = field(repr=False)
    port: int = DEFAULT_MYSQL_PORT
    socket: str | None = None


@dataclass(frozen=True, slots=True)
class Thresholds:
    """容量与告警阈值(百分比)."""

    capacity_gb: float
    warn_percent: float = DEFAULT_WARNING_PERCENT
    crit_percent: float = DEFAULT_CRITICAL_PERCENT


@dataclass(frozen=True, slots=True)
class SchemaUsageRow:
    """单个 schema 的容量汇总行.

    只有 ``total_gb`` 参与判定,其余字段仅用于日志展示.
    """

    table_schema: str
    table_count: int
    row_estimate: str | None
    data_gb: float
    index_gb: float
    total_gb: float
    index_fraction: float | None


@dataclass(frozen=True, slots=True)
class UsageReport:
    """全部 schema 的容量汇总."""

    schemas: tuple[SchemaUsageRow, ...] = ()

    @property
    def total_used_gb(self) -> float:
        """各 schema ``total_gb`` 之和,无数据时为 0.0."""
        return float(sum(row.total_gb for row in self.schemas))

    def used_percent(self, capacity_gb: float) -> float:
        """按给定容量计算使用率(百分比)."""
        return self.total_used_gb * 100 / capacity_gb


@dataclass(frozen=True, slots=True)
class Verdict:
    """检查结论."""

    status: CheckStatus
    message: str

    @property
    def exit_code(self) -> int:
        return int(self.status)

    def render(self) -> str:
        """生成插件输出行,例如 ``CheckMysqlDisk OK: DB size: 1.00, disk use: 1.00%``."""
        return f"{CHECK_NAME} {self.status.name}: {self.message}"

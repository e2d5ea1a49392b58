"""MySQL 磁盘容量巡检服务.

流程严格线性: 校验参数 → 建立连接 → 汇总查询 → 判定 → 释放连接,不做重试.
各步骤以类型化异常表达失败种类,由 ``run`` 在单一出口转换为检查结论.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from mysql_disk_check.constants.system_constants import CheckStatus, ErrorMessages, UsageMessages
from mysql_disk_check.core.exceptions import AppError, ConfigError, UnexpectedError
from mysql_disk_check.services.connection_adapters import DatabaseConnection, MySQLConnection
from mysql_disk_check.services.schema_usage_adapter import MySQLSchemaUsageAdapter
from mysql_disk_check.types.disk_usage import ConnectionParams, Thresholds, UsageReport, Verdict
from mysql_disk_check.utils.option_file import read_client_credentials
from mysql_disk_check.utils.structlog_config import get_system_logger

if TYPE_CHECKING:
    from mysql_disk_check.settings import Settings

ConnectionFactory = Callable[[ConnectionParams], DatabaseConnection]

UNEXPECTED_CHECK_EXCEPTIONS: tuple[type[Exception], ...] = (Exception,)


class DiskUsageCheckService:
    """磁盘容量巡检服务.

    Attributes:
        settings: 启动时构造的不可变配置.
        connection_factory: 依据连接参数创建连接的工厂,默认 MySQLConnection.
        adapter: schema 容量汇总适配器.

    Example:
        >>> service = DiskUsageCheckService(load_settings({"host": "db1", "size": 100}))
        >>> verdict = service.run()
        >>> verdict.exit_code
        0

    """

    def __init__(
        self,
        settings: Settings,
        *,
        connection_factory: ConnectionFactory = MySQLConnection,
        adapter: MySQLSchemaUsageAdapter | None = None,
    ) -> None:
        self.settings = settings
        self.connection_factory = connection_factory
        self.adapter = adapter or MySQLSchemaUsageAdapter()
        self.logger = get_system_logger()

    def resolve_credentials(self) -> ConnectionParams:
        """解析连接参数.

        提供凭据文件时,用户名与密码始终取自文件的 ``client`` 段,忽略命令行传入值.

        Returns:
            ConnectionParams: 不可变连接参数.

        Raises:
            ConfigError: 凭据文件不可读,或 host/user/password/size 缺失,或容量不为正数.

        """
        settings = self.settings
        if settings.ini:
            user, password = read_client_credentials(settings.ini)
        else:
            user, password = settings.username, settings.password

        if not settings.host or user is None or password is None or settings.size is None:
            raise ConfigError(ErrorMessages.MISSING_REQUIRED_OPTIONS, message_key="MISSING_REQUIRED_OPTIONS")
        if settings.size <= 0:
            raise ConfigError(ErrorMessages.INVALID_SIZE, message_key="INVALID_SIZE")

        return ConnectionParams(
            host=settings.host,
            user=user,
            password=password,
            port=settings.port,
            socket=settings.socket,
        )

    def fetch_usage(self, params: ConnectionParams) -> UsageReport:
        """连接数据库并汇总全部 schema 的容量.

        Args:
            params: 已解析的连接参数.

        Returns:
            UsageReport: 容量报告.

        Raises:
            DatabaseConnectionError: 无法建立连接.
            QueryError: 汇总查询失败.

        """
        with self.connection_factory(params) as connection:
            return self.adapter.fetch_schema_usage(connection)

    @staticmethod
    def classify(report: UsageReport, thresholds: Thresholds) -> Verdict:
        """按阈值判定容量使用率,比较均为严格大于.

        Args:
            report: 容量报告.
            thresholds: 容量与阈值.

        Returns:
            Verdict: OK / WARNING / CRITICAL 之一.

        """
        used_percent = report.used_percent(thresholds.capacity_gb)
        diskstr = UsageMessages.DISK_USAGE.format(total=report.total_used_gb, percent=used_percent)

        if used_percent > thresholds.crit_percent:
            return Verdict(CheckStatus.CRITICAL, UsageMessages.CRITICAL_EXCEEDED.format(diskstr=diskstr))
        if used_percent > thresholds.warn_percent:
            return Verdict(CheckStatus.WARNING, UsageMessages.WARNING_EXCEEDED.format(diskstr=diskstr))
        return Verdict(CheckStatus.OK, diskstr)

    def run(self) -> Verdict:
        """执行一次完整巡检,任何失败都转换为检查结论而不向外抛出.

        Returns:
            Verdict: 检查结论.

        """
        try:
            params = self.resolve_credentials()
            thresholds = self.settings.thresholds()
            report = self.fetch_usage(params)
            verdict = self.classify(report, thresholds)
        except AppError as exc:
            return self._verdict_from_error(exc)
        except UNEXPECTED_CHECK_EXCEPTIONS as exc:
            self.logger.info("disk_usage_check_unexpected_error", error=str(exc), exc_info=True)
            return self._verdict_from_error(UnexpectedError(str(exc) or exc.__class__.__name__))

        self.logger.info(
            "disk_usage_classified",
            status=verdict.status.name,
            host=params.host,
            schema_count=len(report.schemas),
            total_used_gb=report.total_used_gb,
            capacity_gb=thresholds.capacity_gb,
        )
        return verdict

    def _verdict_from_error(self, error: AppError) -> Verdict:
        self.logger.info(
            "disk_usage_check_failed",
            status=error.status.name,
            category=error.category.value,
            severity=error.severity.value,
            message_key=error.message_key,
            error=error.message,
            **error.extra,
        )
        return Verdict(error.status, error.message)

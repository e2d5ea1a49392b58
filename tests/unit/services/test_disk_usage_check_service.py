from __future__ import annotations

from typing import Any

import pymysql
import pytest

from mysql_disk_check.constants.system_constants import CheckStatus, ErrorMessages
from mysql_disk_check.core.exceptions import ConfigError
from mysql_disk_check.services.disk_usage_check_service import DiskUsageCheckService
from mysql_disk_check.settings import load_settings
from mysql_disk_check.types.disk_usage import SchemaUsageRow, Thresholds, UsageReport


def _service(**overrides: Any) -> DiskUsageCheckService:
    options: dict[str, Any] = {"host": "db1", "username": "monitor", "password": "secret", "size": 100}
    options.update(overrides)
    return DiskUsageCheckService(load_settings(options))


def _report(*totals: float) -> UsageReport:
    rows = tuple(
        SchemaUsageRow(
            table_schema=f"schema_{index}",
            table_count=1,
            row_estimate="0.00M",
            data_gb=total,
            index_gb=0.0,
            total_gb=total,
            index_fraction=0.0,
        )
        for index, total in enumerate(totals)
    )
    return UsageReport(schemas=rows)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("total", "expected"),
    [
        (50.0, CheckStatus.OK),
        (85.0, CheckStatus.OK),
        (85.01, CheckStatus.WARNING),
        (90.0, CheckStatus.WARNING),
        (95.0, CheckStatus.WARNING),
        (96.0, CheckStatus.CRITICAL),
    ],
)
def test_classify_uses_strict_greater_than(total: float, expected: CheckStatus) -> None:
    verdict = DiskUsageCheckService.classify(_report(total), Thresholds(capacity_gb=100))

    assert verdict.status is expected


@pytest.mark.unit
def test_classify_messages() -> None:
    thresholds = Thresholds(capacity_gb=100, warn_percent=85, crit_percent=95)

    ok = DiskUsageCheckService.classify(_report(12.34), thresholds)
    warning = DiskUsageCheckService.classify(_report(40.0, 50.0), thresholds)
    critical = DiskUsageCheckService.classify(_report(96.0), thresholds)

    assert ok.message == "DB size: 12.34, disk use: 12.34%"
    assert warning.message == "Database size exceeds warning threshold: DB size: 90.00, disk use: 90.00%"
    assert critical.message == "Database size exceeds critical threshold: DB size: 96.00, disk use: 96.00%"


@pytest.mark.unit
def test_classify_empty_report_is_ok() -> None:
    verdict = DiskUsageCheckService.classify(UsageReport(), Thresholds(capacity_gb=10))

    assert verdict.status is CheckStatus.OK
    assert verdict.message == "DB size: 0.00, disk use: 0.00%"


@pytest.mark.unit
@pytest.mark.parametrize("missing", ["host", "username", "password", "size"])
def test_run_reports_unknown_without_connecting_when_required_option_missing(fake_driver, missing: str) -> None:
    state = fake_driver()
    service = _service(**{missing: None})

    verdict = service.run()

    assert verdict.status is CheckStatus.UNKNOWN
    assert verdict.message == "Must specify host, user, password and size"
    assert verdict.exit_code == 3
    assert state["connect_calls"] == 0


@pytest.mark.unit
@pytest.mark.parametrize("size", [0, -10])
def test_run_rejects_non_positive_size_before_connecting(fake_driver, size: float) -> None:
    state = fake_driver()

    verdict = _service(size=size).run()

    assert verdict.status is CheckStatus.UNKNOWN
    assert verdict.message == ErrorMessages.INVALID_SIZE
    assert state["connect_calls"] == 0


@pytest.mark.unit
def test_resolve_credentials_prefers_credentials_file_over_flags(tmp_path) -> None:
    ini = tmp_path / "my.cnf"
    ini.write_text("[client]\nuser = file_user\npassword = file_pass\n", encoding="utf-8")
    service = _service(username="flag_user", password="flag_pass", ini=str(ini), port=3307, socket="/tmp/mysql.sock")

    params = service.resolve_credentials()

    assert params.user == "file_user"
    assert params.password == "file_pass"
    assert params.host == "db1"
    assert params.port == 3307
    assert params.socket == "/tmp/mysql.sock"


@pytest.mark.unit
def test_resolve_credentials_file_without_flags(tmp_path) -> None:
    ini = tmp_path / "my.cnf"
    ini.write_text("[client]\nuser = file_user\npassword = file_pass\n", encoding="utf-8")
    service = _service(username=None, password=None, ini=str(ini))

    params = service.resolve_credentials()

    assert (params.user, params.password) == ("file_user", "file_pass")


@pytest.mark.unit
def test_resolve_credentials_missing_file_raises_config_error(tmp_path) -> None:
    service = _service(ini=str(tmp_path / "absent.cnf"))

    with pytest.raises(ConfigError):
        service.resolve_credentials()


@pytest.mark.unit
def test_run_unreadable_credentials_file_is_unknown(fake_driver, tmp_path) -> None:
    state = fake_driver()
    ini = tmp_path / "my.cnf"
    ini.write_text("[mysqld]\nport = 3306\n", encoding="utf-8")

    verdict = _service(ini=str(ini)).run()

    assert verdict.status is CheckStatus.UNKNOWN
    assert "[client]" in verdict.message
    assert state["connect_calls"] == 0


@pytest.mark.unit
@pytest.mark.parametrize(
    ("totals", "expected", "exit_code"),
    [
        ((40.0, 50.0), CheckStatus.WARNING, 1),
        ((96.0,), CheckStatus.CRITICAL, 2),
        ((20.0, 30.0), CheckStatus.OK, 0),
        ((), CheckStatus.OK, 0),
    ],
)
def test_run_sums_schema_totals_and_classifies(fake_driver, usage_row, totals, expected, exit_code) -> None:
    rows = [usage_row(f"schema_{index}", total) for index, total in enumerate(totals)]
    state = fake_driver(rows)

    verdict = _service().run()

    assert verdict.status is expected
    assert verdict.exit_code == exit_code
    assert state["connection"].close_calls == 1


@pytest.mark.unit
def test_run_warning_scenario_message(fake_driver, usage_row) -> None:
    fake_driver([usage_row("app", 60.0, index_gb=10.0), usage_row("audit", 30.0)])

    verdict = _service().run()

    assert verdict.status is CheckStatus.WARNING
    assert "90.00" in verdict.message
    assert "90.00%" in verdict.message


@pytest.mark.unit
def test_run_connection_error_is_critical_with_driver_details(fake_driver) -> None:
    error = pymysql.err.OperationalError(2003, "Can't connect to MySQL server on 'db1'")
    state = fake_driver(connect_error=error)

    verdict = _service().run()

    assert verdict.status is CheckStatus.CRITICAL
    assert verdict.message == "Error code: 2003 Error message: Can't connect to MySQL server on 'db1'"
    assert state["connect_calls"] == 1


@pytest.mark.unit
def test_run_authentication_error_is_critical(fake_driver) -> None:
    error = pymysql.err.OperationalError(1045, "Access denied for user 'monitor'@'10.0.0.1'")
    fake_driver(connect_error=error)

    verdict = _service().run()

    assert verdict.status is CheckStatus.CRITICAL
    assert "Error code: 1045" in verdict.message
    assert "Access denied" in verdict.message


@pytest.mark.unit
def test_run_query_error_is_critical_and_releases_connection_once(fake_driver) -> None:
    error = pymysql.err.ProgrammingError(1142, "SELECT command denied to user 'monitor'")
    error.sqlstate = "42000"
    state = fake_driver(query_error=error)

    verdict = _service().run()

    assert verdict.status is CheckStatus.CRITICAL
    assert verdict.message == (
        "Error code: 1142 Error message: SELECT command denied to user 'monitor' SQLSTATE: 42000"
    )
    assert state["connection"].close_calls == 1
    assert all(cursor.closed for cursor in state["connection"].cursors)


@pytest.mark.unit
def test_run_malformed_size_value_is_critical_with_raw_message(fake_driver, capsys) -> None:
    state = fake_driver([("app", 1, "0.01M", 1.0, 0.0, "not-a-number", 0.0)])

    verdict = _service().run()

    assert verdict.status is CheckStatus.CRITICAL
    assert "not-a-number" in verdict.message
    assert state["connection"].close_calls == 1
    assert capsys.readouterr().err == ""


@pytest.mark.unit
def test_run_passes_connection_params_to_driver(fake_driver) -> None:
    state = fake_driver([])

    _service(port=3310, socket="/var/run/mysqld/mysqld.sock").run()

    kwargs = state["connect_kwargs"]
    assert kwargs["host"] == "db1"
    assert kwargs["user"] == "monitor"
    assert kwargs["password"] == "secret"
    assert kwargs["port"] == 3310
    assert kwargs["unix_socket"] == "/var/run/mysqld/mysqld.sock"
    assert kwargs["database"] is None


@pytest.mark.unit
def test_run_passes_password_whitespace_unchanged(fake_driver) -> None:
    state = fake_driver([])

    _service(password="  pw  ").run()

    assert state["connect_kwargs"]["password"] == "  pw  "

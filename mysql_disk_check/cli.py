"""命令行入口.

示例::

    check-mysql-disk -h db1.example.com -i /etc/mysql/debian.cnf --size 500 -w 80 -c 90
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import NoReturn

from mysql_disk_check import __version__
from mysql_disk_check.constants.system_constants import (
    CHECK_NAME,
    DEFAULT_CRITICAL_PERCENT,
    DEFAULT_MYSQL_PORT,
    DEFAULT_WARNING_PERCENT,
    ErrorMessages,
)
from mysql_disk_check.core.exceptions import ConfigError
from mysql_disk_check.services.disk_usage_check_service import DiskUsageCheckService
from mysql_disk_check.settings import load_settings
from mysql_disk_check.types.disk_usage import Verdict
from mysql_disk_check.utils.structlog_config import configure_logging


class CheckArgumentParser(argparse.ArgumentParser):
    """参数错误时抛出 ConfigError,而不是以退出码 2(会被误读为 CRITICAL)退出."""

    def error(self, message: str) -> NoReturn:
        raise ConfigError(ErrorMessages.INVALID_OPTIONS.format(detail=message), message_key="INVALID_OPTIONS")


def build_parser() -> CheckArgumentParser:
    """构造命令行解析器.

    ``-h`` 用于 host,帮助信息仅通过 ``--help`` 提供.
    参数缺省值为 None,以便环境变量提供默认值.
    """
    parser = CheckArgumentParser(
        prog="check-mysql-disk",
        description="Check the size of the MySQL databases against warning and critical thresholds.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("--version", action="version", version=f"{CHECK_NAME} {__version__}")
    parser.add_argument("-h", "--host", dest="host", help="Database host")
    parser.add_argument("-u", "--username", dest="username", help="Database username")
    parser.add_argument("-p", "--password", dest="password", help="Database password")
    parser.add_argument("-i", "--ini", dest="ini", help="My.cnf ini file with [client] user and password")
    parser.add_argument("--size", dest="size", type=float, help="Database disk size in GB")
    parser.add_argument(
        "-w",
        "--warning",
        dest="warning",
        type=float,
        help=f"Warning threshold percent (default: {DEFAULT_WARNING_PERCENT:g})",
    )
    parser.add_argument(
        "-c",
        "--critical",
        dest="critical",
        type=float,
        help=f"Critical threshold percent (default: {DEFAULT_CRITICAL_PERCENT:g})",
    )
    parser.add_argument(
        "-P",
        "--port",
        dest="port",
        type=int,
        help=f"Port to connect to (default: {DEFAULT_MYSQL_PORT})",
    )
    parser.add_argument("--socket", dest="socket", help="Socket to use")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """解析参数、执行巡检并输出一行结论.

    Args:
        argv: 命令行参数,默认读取 ``sys.argv``.

    Returns:
        int: 退出码(OK=0, WARNING=1, CRITICAL=2, UNKNOWN=3).

    """
    parser = build_parser()
    try:
        options = vars(parser.parse_args(argv))
        if options.pop("verbose"):
            options["log_level"] = "DEBUG"
        settings = load_settings(options)
    except ConfigError as exc:
        verdict = Verdict(exc.status, exc.message)
    else:
        configure_logging(settings.log_level)
        verdict = DiskUsageCheckService(settings).run()

    print(verdict.render())
    return verdict.exit_code


def run() -> None:
    """console_scripts 入口."""
    sys.exit(main())

"""MySQL 选项文件(my.cnf)读取工具."""

from __future__ import annotations

import configparser
from pathlib import Path

from mysql_disk_check.constants.system_constants import ErrorMessages
from mysql_disk_check.core.exceptions import ConfigError
from mysql_disk_check.utils.structlog_config import log_info

CLIENT_SECTION = "client"
_QUOTES = ("'", '"')


def _strip_quotes(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


def _build_parser() -> configparser.ConfigParser:
    # my.cnf 允许无值选项(skip-ssl)与 !include 指令,这里按注释行忽略指令
    return configparser.ConfigParser(
        allow_no_value=True,
        interpolation=None,
        strict=False,
        comment_prefixes=("#", ";", "!"),
        inline_comment_prefixes=None,
    )


def read_client_credentials(path: str | Path, section: str = CLIENT_SECTION) -> tuple[str, str]:
    """读取选项文件中的用户名与密码.

    Args:
        path: 选项文件路径.
        section: 读取的段落名称,默认 ``client``.

    Returns:
        tuple[str, str]: ``(user, password)``.

    Raises:
        ConfigError: 文件不存在、无法解析,或缺少段落/键时抛出.

    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ConfigError(
            ErrorMessages.CREDENTIALS_FILE_NOT_FOUND.format(path=file_path),
            message_key="CREDENTIALS_FILE_NOT_FOUND",
        )

    parser = _build_parser()
    try:
        with file_path.open(encoding="utf-8") as handle:
            parser.read_file(handle)
    except (OSError, UnicodeDecodeError, configparser.Error) as exc:
        raise ConfigError(
            ErrorMessages.CREDENTIALS_FILE_UNREADABLE.format(path=file_path, detail=exc),
            message_key="CREDENTIALS_FILE_UNREADABLE",
        ) from exc

    if not parser.has_section(section):
        raise ConfigError(
            ErrorMessages.CREDENTIALS_SECTION_MISSING.format(path=file_path, section=section),
            message_key="CREDENTIALS_SECTION_MISSING",
        )

    values: dict[str, str] = {}
    for key in ("user", "password"):
        raw = parser.get(section, key, fallback=None)
        if raw is None:
            raise ConfigError(
                ErrorMessages.CREDENTIALS_KEY_MISSING.format(path=file_path, key=key, section=section),
                message_key="CREDENTIALS_KEY_MISSING",
            )
        values[key] = _strip_quotes(raw)

    log_info("credentials_file_loaded", module="config", path=str(file_path), section=section)
    return values["user"], values["password"]

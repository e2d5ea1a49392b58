"""MySQL 磁盘巡检 - 统一配置读取与校验.

目标:
- 启动时一次性构造不可变的 Settings,之后只读传递给巡检服务.
- 环境变量(前缀 ``MYSQL_DISK_``)提供默认值,命令行显式给出的参数优先.

说明:
- 必填项(host/user/password/size)在此处允许为空,由巡检服务统一判定为 UNKNOWN,
  保证缺参时输出固定文案.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mysql_disk_check.constants.system_constants import (
    DEFAULT_CRITICAL_PERCENT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MYSQL_PORT,
    DEFAULT_WARNING_PERCENT,
    ErrorMessages,
    LogLevel,
)
from mysql_disk_check.core.exceptions import ConfigError
from mysql_disk_check.types.disk_usage import Thresholds

ENV_PREFIX = "MYSQL_DISK_"


class Settings(BaseSettings):
    """单次巡检的运行时设置集合."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    host: str | None = None
    username: str | None = None
    password: str | None = Field(default=None, repr=False)
    ini: str | None = None
    size: float | None = Field(default=None, allow_inf_nan=False)
    warning: float = Field(default=DEFAULT_WARNING_PERCENT, allow_inf_nan=False)
    critical: float = Field(default=DEFAULT_CRITICAL_PERCENT, allow_inf_nan=False)
    port: int = DEFAULT_MYSQL_PORT
    socket: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("host", "ini", "socket", mode="before")
    @classmethod
    def _strip_text(cls, value: object) -> object:
        # username/password 不在此列,保持原样
        return value.strip() if isinstance(value, str) else value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in LogLevel.__members__:
            msg = f"unsupported log level: {value}"
            raise ValueError(msg)
        return normalized

    def thresholds(self) -> Thresholds:
        """返回阈值视图.

        Raises:
            ConfigError: 未配置容量时抛出.

        """
        if self.size is None:
            raise ConfigError(ErrorMessages.MISSING_REQUIRED_OPTIONS)
        return Thresholds(capacity_gb=self.size, warn_percent=self.warning, crit_percent=self.critical)


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "settings"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


def load_settings(overrides: Mapping[str, Any] | None = None) -> Settings:
    """构造 Settings,显式传入的值覆盖环境变量.

    Args:
        overrides: 命令行等来源的覆盖值,值为 None 的键视为未提供.

    Returns:
        Settings: 不可变配置对象.

    Raises:
        ConfigError: 配置值无法通过校验时抛出.

    """
    provided = {key: value for key, value in (overrides or {}).items() if value is not None}
    try:
        return Settings(**provided)
    except ValidationError as exc:
        raise ConfigError(
            ErrorMessages.INVALID_OPTIONS.format(detail=_format_validation_error(exc)),
            message_key="INVALID_OPTIONS",
        ) from exc

"""Runtime settings, read from ``NICCONFIG_*`` environment variables or a local ``.env``."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nicconfig.errors import InvalidSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="NICCONFIG_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    powershell_executable: str = Field(
        default="powershell",
        min_length=1,
        description="Command interpreter used for every query and mutation.",
    )
    command_timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Kill the command's process tree after this many seconds. None waits forever.",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Root log level used by the command-line front end.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value


def get_settings() -> Settings:
    """Load settings; a bad ``NICCONFIG_*`` value raises ``InvalidSettings`` naming the field."""
    try:
        return Settings()
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        names = ", ".join(f"NICCONFIG_{f.upper()}" for f in fields) or "NICCONFIG_*"
        raise InvalidSettings(code=50, msg=f"Invalid setting: {names}", cause=e, context={"fields": fields}) from e

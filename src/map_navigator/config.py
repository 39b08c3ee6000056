"""Environment-driven settings."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from map_navigator.errors import MapNavigationError
from map_navigator.types import Platform

DEFAULT_SOURCE = "map_navigator"
ENV_PREFIX = "MAP_NAVIGATOR_"


class Settings(BaseModel):
    """Runtime configuration shared by the API, CLI and HTTP entrypoints."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: str = Field(default=DEFAULT_SOURCE, min_length=1)
    platform: Platform | None = None
    adb_serial: str | None = None
    use_adb: bool = False
    command_timeout: float | None = Field(default=None, gt=0.0)
    log_level: str = "WARNING"
    http_host: str = "0.0.0.0"
    http_port: int = Field(default=8095, gt=0, lt=65536)
    provider_modules: tuple[str, ...] = ()

    @field_validator("provider_modules", mode="before")
    @classmethod
    def _split_provider_modules(cls, value: object) -> object:
        """Accept a comma-separated list of module names or file paths."""
        if isinstance(value, str):
            return tuple(item.strip() for item in value.split(",") if item.strip())
        return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from ``MAP_NAVIGATOR_*`` environment variables.

    Unset or empty variables fall back to model defaults. Setting
    ``MAP_NAVIGATOR_ADB_SERIAL`` implies routing device commands through adb.
    ``MAP_NAVIGATOR_PROVIDER_MODULES`` is a comma-separated list of extra
    provider modules or files.
    """
    env = os.environ if environ is None else environ
    raw: dict[str, object] = {}
    for field_name in Settings.model_fields:
        value = env.get(f"{ENV_PREFIX}{field_name.upper()}")
        if value:
            raw[field_name] = value.strip()
    if raw.get("adb_serial"):
        raw.setdefault("use_adb", True)
    try:
        return Settings.model_validate(raw)
    except ValidationError as exc:
        raise MapNavigationError(f"Invalid map navigator settings: {exc}") from exc


def configure_logging(level: str | int = "WARNING") -> None:
    """Configure root logging for command-line and server entrypoints."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)

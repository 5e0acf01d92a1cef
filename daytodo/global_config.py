"""Global configuration storage for daytodo.

Stores user preferences in ~/.daytodo/config.json (or $DAYTODO_HOME).
"""

import json
import logging
import os
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_HOME_ENV = "DAYTODO_HOME"


class AppSettings(BaseModel):
    """Persisted user settings."""

    data_dir: str | None = Field(
        default=None,
        description="Directory for day files (default: <config dir>/todos)",
    )
    with_header: bool = Field(
        default=True,
        description="Start each day file with a date and timezone header line",
    )
    utc_offset_minutes: int | None = Field(
        default=None,
        ge=-24 * 60 + 1,
        le=24 * 60 - 1,
        description="Fixed UTC offset for timestamps (default: local time)",
    )


def get_config_dir() -> Path:
    """Get the daytodo config directory, creating it if needed."""
    override = os.environ.get(CONFIG_HOME_ENV)
    config_dir = Path(override) if override else Path.home() / ".daytodo"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_settings() -> AppSettings:
    """Load settings, falling back to defaults for a missing or bad file."""
    config_file = get_config_dir() / "config.json"
    if config_file.exists():
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
            return AppSettings(**data)
        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            logger.warning(f"Ignoring invalid {config_file}: {e}")
    return AppSettings()  # defaults


def save_settings(settings: AppSettings) -> Path:
    """Save settings and return the file written."""
    config_file = get_config_dir() / "config.json"
    config_file.write_text(
        json.dumps(settings.model_dump(), indent=2),
        encoding="utf-8",
    )
    return config_file


def resolve_data_dir(settings: AppSettings, explicit: str | None = None) -> Path:
    """Directory holding day files: explicit option, then settings, then default."""
    if explicit:
        return Path(explicit).expanduser()
    if settings.data_dir:
        return Path(settings.data_dir).expanduser()
    return get_config_dir() / "todos"


def resolve_timezone(settings: AppSettings) -> timezone:
    """Fixed-offset timezone for the session.

    Day files store one offset in their header, so the local zone is pinned
    to its current offset rather than kept as a named zone.
    """
    if settings.utc_offset_minutes is not None:
        return timezone(timedelta(minutes=settings.utc_offset_minutes))
    offset = datetime.now().astimezone().utcoffset() or timedelta(0)
    return timezone(offset)


def today(tz: timezone) -> date:
    return datetime.now(tz).date()

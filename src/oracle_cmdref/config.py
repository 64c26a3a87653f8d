"""Runtime configuration for oracle-cmdref."""

from dataclasses import dataclass
import os
from pathlib import Path

from oracle_cmdref.utils import DEFAULT_SEARCH_LIMIT, MAX_SEARCH_LIMIT

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_path(name: str) -> Path | None:
    value = os.getenv(name)
    if not value or not value.strip():
        return None
    return Path(value.strip()).expanduser()


@dataclass(frozen=True)
class CmdrefConfig:
    catalog_path: Path | None
    search_limit: int
    log_level: str


def get_config() -> CmdrefConfig:
    """Load config from environment variables."""
    limit = _env_int("ORACLE_CMDREF_SEARCH_LIMIT", DEFAULT_SEARCH_LIMIT)
    log_level = os.getenv("ORACLE_CMDREF_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = "WARNING"
    return CmdrefConfig(
        catalog_path=_env_path("ORACLE_CMDREF_CATALOG_PATH"),
        search_limit=min(MAX_SEARCH_LIMIT, max(1, limit)),
        log_level=log_level,
    )

"""Runtime configuration.

Each setting resolves as: explicit argument > environment variable > default.
"""

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from modeldb.consts import (
    DEFAULT_DATA_DIR,
    EDGE_CACHE_MAX_AGE,
    EDGE_CACHE_TIMEOUT,
    ENV_ADMIN_TOKEN,
    ENV_CACHE_TIMEOUT,
    ENV_CACHE_TTL,
    ENV_DATA_DIR,
    ENV_REFRESH_INTERVAL,
    ENV_SOURCE_URL,
    LITELLM_MODEL_URL,
    REFRESH_INTERVAL_SECONDS,
)
from modeldb.errors import ConfigurationError

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Resolved configuration for one process."""

    data_dir: Path = Field(default=DEFAULT_DATA_DIR, description="Root for durable store and cache")
    source_url: str = Field(default=LITELLM_MODEL_URL, description="Upstream feed URL")
    admin_token: str | None = Field(default=None, description="Token for manual refresh")
    refresh_interval_seconds: int = Field(default=REFRESH_INTERVAL_SECONDS, gt=0)
    cache_timeout_seconds: float = Field(default=EDGE_CACHE_TIMEOUT, gt=0)
    cache_ttl_seconds: int = Field(default=EDGE_CACHE_MAX_AGE, ge=0)

    @property
    def kv_dir(self) -> Path:
        """Directory backing the file durable store."""
        return self.data_dir / "kv"

    @property
    def cache_dir(self) -> Path:
        """Directory backing the file edge cache."""
        return self.data_dir / "cache"


def _env_number(name: str, cast: type) -> Any | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"Invalid value for {name}: {raw!r}") from e


def load_settings(
    data_dir: Path | str | None = None,
    source_url: str | None = None,
    admin_token: str | None = None,
    refresh_interval_seconds: int | None = None,
    cache_timeout_seconds: float | None = None,
    cache_ttl_seconds: int | None = None,
) -> Settings:
    """Resolve settings from arguments, then environment, then defaults.

    Args:
        data_dir: Root data directory.
        source_url: Upstream feed URL.
        admin_token: Token required by the manual refresh trigger.
        refresh_interval_seconds: Scheduler period.
        cache_timeout_seconds: Read-path timeout for the edge cache tier.
        cache_ttl_seconds: TTL for file-backed edge cache entries.

    Returns:
        Resolved Settings.

    Raises:
        ConfigurationError: If an environment value cannot be parsed.
    """
    values: dict[str, Any] = {}

    if data_dir is None:
        data_dir = os.getenv(ENV_DATA_DIR, "").strip() or None
    if data_dir is not None:
        values["data_dir"] = Path(data_dir)

    source_url = source_url or os.getenv(ENV_SOURCE_URL, "").strip() or None
    if source_url:
        values["source_url"] = source_url

    admin_token = admin_token or os.getenv(ENV_ADMIN_TOKEN, "").strip() or None
    if admin_token:
        values["admin_token"] = admin_token

    if refresh_interval_seconds is None:
        refresh_interval_seconds = _env_number(ENV_REFRESH_INTERVAL, int)
    if refresh_interval_seconds is not None:
        values["refresh_interval_seconds"] = refresh_interval_seconds

    if cache_timeout_seconds is None:
        cache_timeout_seconds = _env_number(ENV_CACHE_TIMEOUT, float)
    if cache_timeout_seconds is not None:
        values["cache_timeout_seconds"] = cache_timeout_seconds

    if cache_ttl_seconds is None:
        cache_ttl_seconds = _env_number(ENV_CACHE_TTL, int)
    if cache_ttl_seconds is not None:
        values["cache_ttl_seconds"] = cache_ttl_seconds

    settings = Settings(**values)
    logger.debug(f"Loaded settings: data_dir={settings.data_dir}, source={settings.source_url}")
    return settings

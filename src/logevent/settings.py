"""
logevent.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven defaults for the call-site resolver and internal logging.
- Offer a cached settings instance used to build the default runtime.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Process-wide defaults:
    - Strict env-driven configuration (LOGEVENT_*)
    - Defaults never strip paths and never skip wrapper files
    - Single settings object feeding the default EventRuntime
    """

    model_config = SettingsConfigDict(env_prefix="LOGEVENT_", case_sensitive=False)

    service_name: str = "logevent"
    log_level: str = "WARNING"

    # Resolver: files of application-defined logging wrappers, e.g. r"/(my_log_wrapper)\.py$".
    ignore_file_regex: str | None = None
    # Resolver: path prefix to strip from reported files, e.g. r"^.*/(src/)".
    ignore_path_regex: str | None = None
    # Class name (or parent class name) identifying framework frames.
    logger_base_name: str = "Logger"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars each time a default runtime is requested.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Settings are read once; later changes go through ResolverConfig setters on the
# runtime rather than through the environment.

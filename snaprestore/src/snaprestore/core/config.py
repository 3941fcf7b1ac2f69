"""Configuration management for snaprestore."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """snaprestore configuration settings.

    Not to be confused with ``snaprestore.common.settings.Settings``, which
    holds repository-specific restore overrides carried by a request.
    """

    # General settings
    app_name: str = "snaprestore"
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    # Request defaults
    master_node_timeout: str = "30s"
    default_indices_options: Literal[
        "lenient_expand_open", "strict_expand_open", "strict_expand_open_closed"
    ] = "lenient_expand_open"

    # Execution settings
    listener_threads: int = 0  # 0 invokes listeners on the submitting thread

    model_config = {
        "env_prefix": "SNAPRESTORE_",
        "env_file": ".env",
    }


@lru_cache
def get_settings() -> AppSettings:
    """Get cached settings instance."""
    return AppSettings()

"""Application configuration helpers."""

from __future__ import annotations

from .clash import ClashConfig, get_clash_config
from .env import env_float, env_int, env_list, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .storage import StorageConfig, get_storage_config
from .tracker import get_thresholds, get_tracker_settings

__all__ = [
    "ClashConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "configure_logging",
    "env_float",
    "env_int",
    "env_list",
    "get_clash_config",
    "get_storage_config",
    "get_thresholds",
    "get_tracker_settings",
    "require_env_var",
    "require_env_vars",
]

"""Configuration adapters."""

from opentransport.adapters.config.cli_settings import CliSettings
from opentransport.adapters.config.client_config import (
    DEFAULT_API_URL,
    DEFAULT_MAX_RETRY,
    DEFAULT_RETRY_PAUSE,
    DEFAULT_USER_AGENT,
    MAX_RETRY_LIMIT,
    ClientConfig,
    replace_config,
    validate_client_config,
    validate_retry_policy,
)

__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_MAX_RETRY",
    "DEFAULT_RETRY_PAUSE",
    "DEFAULT_USER_AGENT",
    "MAX_RETRY_LIMIT",
    "CliSettings",
    "ClientConfig",
    "replace_config",
    "validate_client_config",
    "validate_retry_policy",
]

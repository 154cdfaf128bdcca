"""Environment-based settings for the command line tool.

The library itself is configured programmatically only. These settings
are read by ``opentransport.cli`` to build the client.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from opentransport.adapters.config.client_config import (
    DEFAULT_API_URL,
    DEFAULT_MAX_RETRY,
    DEFAULT_RETRY_PAUSE,
    DEFAULT_USER_AGENT,
)


class CliSettings(BaseSettings):
    """CLI configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_prefix="OPENTRANSPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_url: str = Field(default=DEFAULT_API_URL, description="Base URL of the transport API")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header value")
    max_retry: int = Field(default=DEFAULT_MAX_RETRY, description="Retries after a failure")
    retry_pause: int = Field(
        default=DEFAULT_RETRY_PAUSE, description="Pause between retries in seconds"
    )
    log_requests: bool = Field(
        default=False, description="Write client debug and error logs to stdout/stderr"
    )
    timeout_seconds: float | None = Field(
        default=None, description="Deadline for a single query including retries"
    )

"""Client configuration with validation on construction."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from opentransport.domain.errors import ConfigError

# The default URL which points to the production API
DEFAULT_API_URL = "https://transport.opendata.ch/v1/"

# The default user agent includes the name of the library and its version number
DEFAULT_USER_AGENT = "Python OpenTransport Client/v1.0"

DEFAULT_MAX_RETRY = 3
DEFAULT_RETRY_PAUSE = 5  # seconds
MAX_RETRY_LIMIT = 10


def validate_retry_policy(attempts: int, pause: int) -> None:
    """Validate retry attempts and pause.

    Raises:
        ValueError: If attempts is outside [0, 10] or pause is below one second.
    """
    if attempts < 0 or attempts > MAX_RETRY_LIMIT:
        raise ValueError(f"please provide a max retry between 0 and {MAX_RETRY_LIMIT}")
    if pause < 1:
        raise ValueError("please provide a max retry pause of at least 1 second")


class ClientConfig(BaseModel):
    """Configuration shared by every call of one client.

    Instances are frozen. A config that fails validation is never created.
    """

    model_config = ConfigDict(frozen=True)

    api_base_url: str = Field(
        default=DEFAULT_API_URL,
        description="Absolute URL of the API, request paths are appended to it",
    )
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header value")
    max_retry_attempts: int = Field(
        default=DEFAULT_MAX_RETRY,
        strict=True,
        description="Retries after a failed attempt (0-10)",
    )
    retry_pause_seconds: int = Field(
        default=DEFAULT_RETRY_PAUSE,
        strict=True,
        description="Fixed pause between attempts in seconds",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Require scheme and host, and make sure the URL ends with a slash."""
        if not v:
            raise ValueError("please provide a api url")
        try:
            parts = urlsplit(v)
            host = parts.hostname
        except ValueError as e:
            raise ValueError(f"could not parse api url: {e}") from e
        if not parts.scheme:
            raise ValueError("please provide a valid api url scheme")
        if not host:
            raise ValueError("please provide a valid api url host")
        if not parts.path.endswith("/"):
            parts = parts._replace(path=parts.path + "/")
        return urlunsplit(parts)

    @field_validator("user_agent")
    @classmethod
    def default_empty_user_agent(cls, v: str) -> str:
        """Fall back to the library user agent when empty."""
        return v or DEFAULT_USER_AGENT

    @field_validator("max_retry_attempts")
    @classmethod
    def validate_max_retry_attempts(cls, v: int) -> int:
        validate_retry_policy(v, 1)
        return v

    @field_validator("retry_pause_seconds")
    @classmethod
    def validate_retry_pause_seconds(cls, v: int) -> int:
        validate_retry_policy(0, v)
        return v


def _first_error_message(error: ValidationError) -> str:
    """Extract the message of the first failed rule."""
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    message = str(first.get("msg", error))
    # pydantic prefixes messages of ValueErrors raised in validators
    return message.removeprefix("Value error, ")


def validate_client_config(config: ClientConfig | Mapping[str, Any] | None) -> ClientConfig:
    """Return a valid ClientConfig or raise ConfigError naming the violated rule.

    Args:
        config: A ClientConfig or a mapping of field values. A ClientConfig is
            validated again, since model_copy and model_construct skip validators.

    Raises:
        ConfigError: If config is None or any field is invalid.
    """
    if config is None:
        raise ConfigError("client config cannot be None")
    values = config.model_dump() if isinstance(config, ClientConfig) else dict(config)
    try:
        return ClientConfig.model_validate(values)
    except ValidationError as e:
        raise ConfigError(f"invalid client config: {_first_error_message(e)}") from e


def replace_config(config: ClientConfig, **changes: Any) -> ClientConfig:
    """Return a re-validated copy of ``config`` with ``changes`` applied."""
    return validate_client_config({**config.model_dump(), **changes})

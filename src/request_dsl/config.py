"""
Default request settings.
"""
import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

# Constants
DEFAULT_TIMEOUT_MS = 5000
ENV_DEFAULT_TIMEOUT = "REQUEST_DSL_DEFAULT_TIMEOUT"
ENV_BASE_URL = "REQUEST_DSL_BASE_URL"


class RequestConfig(BaseModel):
    """Defaults applied by ``ConfigurableRequestBuilder``.

    ``default_timeout`` (ms) seeds the connect and read timeouts,
    ``default_headers`` are asserted before the caller's headers, and
    ``base_url`` is available for composing URLs.
    """
    model_config = ConfigDict(frozen=True)

    default_timeout: int = DEFAULT_TIMEOUT_MS
    default_headers: Dict[str, str] = Field(default_factory=dict)
    base_url: str = ""

    @field_validator("default_timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("default_timeout must be a positive number of milliseconds")
        return v

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        return v.strip()


def _env_str(name: str) -> Optional[str]:
    """Non-empty value of ``name`` from the environment, else None."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    logger.debug(f"Resolved {name} from environment")
    return value.strip()


def _env_int(name: str) -> Optional[int]:
    """Integer value of ``name`` from the environment, else None.

    Raises:
        ValueError: If the variable is set but is not an integer.
    """
    value = _env_str(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer number of milliseconds, got {value!r}") from None


def resolve_config(
    config: Optional[Dict[str, Any]] = None,
    default_timeout: Optional[int] = None,
    base_url: Optional[str] = None,
    default_headers: Optional[Dict[str, str]] = None,
) -> RequestConfig:
    """Build a RequestConfig.

    Each setting is taken from the first of: the keyword argument, the
    ``REQUEST_DSL_*`` environment variable, ``config`` and the default.
    Headers have no environment variable.
    """
    config = config or {}

    if default_timeout is None:
        default_timeout = _env_int(ENV_DEFAULT_TIMEOUT)
    if default_timeout is None:
        default_timeout = config.get("default_timeout", DEFAULT_TIMEOUT_MS)

    if base_url is None:
        base_url = _env_str(ENV_BASE_URL)
    if base_url is None:
        base_url = config.get("base_url", "")

    if default_headers is None:
        default_headers = config.get("default_headers", {})

    return RequestConfig(
        default_timeout=default_timeout,
        base_url=base_url,
        default_headers=default_headers,
    )

"""Local validation and query-parameter marshalling."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlparse

from .errors import ConfigError, ParameterError

ParamValue = str | int | float


def validate_api_key(api_key: Any) -> str:
    """Return the API key unchanged or raise ConfigError when it is missing."""
    if not isinstance(api_key, str) or not api_key:
        raise ConfigError("API key is required")
    return api_key


def is_supported_base_url(url: str) -> bool:
    """Allow only absolute HTTP(S) URLs with a hostname."""
    parsed = urlparse(url)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def validate_client_settings(
    *,
    api_key: Any,
    base_url: str,
    timeout: float | None,
) -> None:
    """Validate client configuration and raise ConfigError on invalid values."""
    validate_api_key(api_key)
    if not is_supported_base_url(base_url):
        raise ConfigError(f"Base URL must be an absolute http(s) URL, got {base_url!r}.")
    if timeout is not None and timeout <= 0:
        raise ConfigError("Timeout must be > 0 when set.")


def flatten_params(fields: Mapping[str, Any]) -> dict[str, ParamValue]:
    """Build flat query parameters, dropping unset values.

    Raises ParameterError for nested values, which cannot be expressed as a
    single query-string entry.
    """
    params: dict[str, ParamValue] = {}
    for name, value in fields.items():
        if value is None:
            continue
        if isinstance(value, bool):
            params[name] = "true" if value else "false"
        elif isinstance(value, (str, int, float)):
            params[name] = value
        else:
            raise ParameterError(
                f"Parameter {name!r} must be a scalar, got {type(value).__name__}."
            )
    return params


def require_domain_or_company(domain: str | None, company: str | None) -> None:
    """Domain search needs at least one of domain or company."""
    if not domain and not company:
        raise ParameterError("Missing required parameter, domain or company")

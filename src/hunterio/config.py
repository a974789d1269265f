"""Client configuration model."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .validation import validate_client_settings

API_BASE = "https://api.hunter.io/v2"
API_KEY_ENV_VAR = "HUNTER_API_KEY"
DEFAULT_REQUEST_TIMEOUT = 15.0
DEFAULT_USER_AGENT = "hunterio-python/1.0"


@dataclass(frozen=True)
class ClientConfig:
    """Validated, read-only settings shared by every call of one client."""

    api_key: str
    base_url: str = API_BASE
    timeout: float | None = DEFAULT_REQUEST_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        validate_client_settings(
            api_key=self.api_key,
            base_url=self.base_url,
            timeout=self.timeout,
        )

    def url_for(self, path: str) -> str:
        return self.base_url.rstrip("/") + "/" + path.lstrip("/")

    def __repr__(self) -> str:
        return (
            f"ClientConfig(api_key='***', base_url={self.base_url!r}, "
            f"timeout={self.timeout!r}, user_agent={self.user_agent!r})"
        )


def api_key_from_env(environ: Mapping[str, str] | None = None) -> str | None:
    """Read the API key from the environment, returning None when unset or blank."""
    source = os.environ if environ is None else environ
    value = source.get(API_KEY_ENV_VAR, "").strip()
    return value or None

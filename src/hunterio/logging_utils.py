"""Logging helpers.

Request URLs carry the API key as a query parameter, and urllib3 logs them at
debug level, so every handler installed here masks ``api_key`` values.
"""

from __future__ import annotations

import logging
import re

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
API_KEY_PATTERN = re.compile(r"(api_key=)[^&\s\"']+")
REDACTED = "***"


def redact_api_key(text: str) -> str:
    """Mask every ``api_key=...`` query value in text."""
    return API_KEY_PATTERN.sub(rf"\g<1>{REDACTED}", text)


class ApiKeyRedactingFilter(logging.Filter):
    """Rewrite records so formatted messages never contain the API key."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_api_key(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def configure_logging(verbose: bool = False) -> None:
    """Configure CLI logging: warnings by default, debug (including urllib3) when verbose."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    for handler in logging.getLogger().handlers:
        if not any(isinstance(item, ApiKeyRedactingFilter) for item in handler.filters):
            handler.addFilter(ApiKeyRedactingFilter())


def get_logger() -> logging.Logger:
    return logging.getLogger("hunterio")

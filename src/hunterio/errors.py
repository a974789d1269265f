"""Custom exceptions for the Hunter client."""


class HunterioError(Exception):
    """Base exception for this project."""


class ConfigError(HunterioError):
    """Raised when client configuration is invalid."""


class ParameterError(HunterioError):
    """Raised when request parameters fail local validation."""


class ResponseShapeError(HunterioError):
    """Raised when a successful response body does not have the expected envelope."""

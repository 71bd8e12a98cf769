"""Adapter-specific exceptions.

These signal programming or configuration defects. Provider failures
(timeouts, HTTP errors, undecodable bodies) are never raised; they are
returned as ``Failure`` outcomes.
"""


class AdapterError(Exception):
    """Base exception for adapter errors."""


class ConnectionError(AdapterError):
    """Raised when an adapter is used before its HTTP client exists."""


class ConfigurationError(AdapterError):
    """Raised when adapter configuration is invalid."""


class ValidationError(AdapterError):
    """Raised when an adapter receives a request meant for another provider."""

"""
cloud-detect exception hierarchy.

All library exceptions inherit from CloudDetectError. Detection itself never
raises: these cover configuration and roster-building mistakes only.
"""


class CloudDetectError(Exception):
    """Base exception class for all cloud-detect errors."""


class ConfigurationError(CloudDetectError):
    """Raised for configuration errors (invalid values, unknown or duplicate providers)."""


class ProviderLoadError(CloudDetectError):
    """Raised when a provider plugin cannot be loaded or is not a valid provider."""

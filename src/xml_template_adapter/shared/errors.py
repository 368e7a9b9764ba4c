"""Exception types raised by the template adapter layer.

Missing attributes and missing child groups are not errors: lookups return
``None`` and an empty sequence respectively. Exceptions are reserved for
out-of-range sequence access, failed scalar adaptation and bad configuration.
"""

from typing import List, Optional


class AdapterError(Exception):
    """Base exception for adapter failures."""


class NodeIndexError(AdapterError, IndexError):
    """Raised when an adapter sequence is indexed outside its valid range."""

    def __init__(self, message: str, index: object, name: Optional[str] = None) -> None:
        super().__init__(message)
        self.index = index
        self.name = name


class WrappingError(AdapterError):
    """Raised when a raw string cannot be adapted into the engine's scalar type."""


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []

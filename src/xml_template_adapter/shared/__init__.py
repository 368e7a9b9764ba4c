"""Shared utilities for the template adapter layer.

This module provides configuration objects, error types and logging helpers
used across the tree, adapter and rendering packages.
"""

from .config import (
    AdapterConfig,
    EnvironmentConfig,
    RenderConfig,
)
from .errors import (
    AdapterError,
    ConfigError,
    ConfigValidationError,
    NodeIndexError,
    WrappingError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "AdapterConfig",
    "EnvironmentConfig",
    "RenderConfig",
    "AdapterError",
    "ConfigError",
    "ConfigValidationError",
    "NodeIndexError",
    "WrappingError",
    "CorrelationLogger",
    "get_logger",
]

"""Conversion of raw strings into the template engine's native scalar type."""

from typing import Any, Optional

from markupsafe import escape, soft_str

from xml_template_adapter.shared import AdapterConfig, WrappingError, get_logger

_logger = get_logger(__name__, component="scalars")
_DEFAULT_CONFIG = AdapterConfig()


def to_native_scalar(value: Optional[str], config: Optional[AdapterConfig] = None) -> Any:
    """Adapt a raw attribute or text value for the template engine.

    With default configuration the value is returned as a plain ``str``;
    ``escape_scalars`` produces a ``markupsafe.Markup`` and ``scalar_factory``
    replaces the conversion altogether.

    Args:
        value: Raw string value
        config: Adapter configuration; defaults apply when omitted

    Returns:
        The engine-native scalar

    Raises:
        WrappingError: If the conversion step fails
    """
    if config is None:
        config = _DEFAULT_CONFIG

    try:
        if config.scalar_factory is not None:
            return config.scalar_factory(value)
        if config.escape_scalars:
            return escape(value)
        return soft_str(value)
    except Exception as e:
        _logger.error(
            "Error wrapping value for template engine",
            extra={"value_type": type(value).__name__},
        )
        raise WrappingError("Error wrapping value for template engine") from e

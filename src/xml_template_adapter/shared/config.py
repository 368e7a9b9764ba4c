"""Configuration classes for tree adaptation and template rendering.

This module provides configuration objects for the adapter layer and the
Jinja2 rendering integration, enabling control over scalar adaptation,
undefined handling and whitespace behavior.
"""

import json
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Dict, List, Optional

from .errors import ConfigValidationError

VALID_UNDEFINED_MODES = ["default", "strict", "chainable"]
VALID_LOGGING_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_NEWLINE_SEQUENCES = ["\n", "\r\n", "\r"]

# Fields flagged with this metadata key are left out of dict/JSON round trips
_SERIALIZE = "serialize"


@dataclass
class AdapterConfig:
    """Configuration for the node adapters."""

    # Wrap attribute/text values as markupsafe.Markup instead of plain str
    escape_scalars: bool = False
    # Overrides the native scalar conversion entirely when set
    scalar_factory: Optional[Callable[[str], Any]] = field(
        default=None, compare=False, metadata={_SERIALIZE: False}
    )

    def __post_init__(self) -> None:
        """Validate adapter configuration."""
        if self.scalar_factory is not None and not callable(self.scalar_factory):
            raise ValueError("scalar_factory must be callable or None")


@dataclass
class EnvironmentConfig:
    """Configuration for the Jinja2 environment used to render adapted trees."""

    autoescape: bool = False
    undefined: str = "default"  # default, strict, chainable
    trim_blocks: bool = True
    lstrip_blocks: bool = True
    keep_trailing_newline: bool = False
    newline_sequence: str = "\n"

    def __post_init__(self) -> None:
        """Validate environment configuration."""
        if self.undefined not in VALID_UNDEFINED_MODES:
            raise ValueError(f"undefined must be one of {VALID_UNDEFINED_MODES}")
        if self.newline_sequence not in VALID_NEWLINE_SEQUENCES:
            raise ValueError("newline_sequence must be one of '\\n', '\\r\\n', '\\r'")


@dataclass(frozen=True)
class RenderConfig:
    """Complete configuration for rendering templates over adapted trees.

    Immutable once built; use ``override`` to derive variants.
    """

    adapter: AdapterConfig = field(default_factory=AdapterConfig)
    environment: EnvironmentConfig = field(default_factory=EnvironmentConfig)

    logging_level: str = "INFO"
    correlation_id: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete render configuration."""
        try:
            self.adapter.__post_init__()
            self.environment.__post_init__()
            if self.logging_level not in VALID_LOGGING_LEVELS:
                raise ValueError(f"logging_level must be one of {VALID_LOGGING_LEVELS}")
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

        if self.adapter.escape_scalars and not self.environment.autoescape:
            raise ConfigValidationError(
                "escape_scalars requires an autoescaping environment",
                field_name="adapter.escape_scalars",
                suggestions=["Enable environment.autoescape",
                             "Disable adapter.escape_scalars"]
            )

    def override(self, **kwargs: Any) -> "RenderConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Keyword arguments for configuration fields to override

        Returns:
            New RenderConfig instance with overrides applied

        Example:
            >>> config = RenderConfig()
            >>> strict = config.override(environment__undefined="strict")
        """
        nested_overrides: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                nested_overrides[key] = value

        new_fields: Dict[str, Any] = {}
        for component in ["adapter", "environment"]:
            if component in nested_overrides:
                new_fields[component] = replace(
                    getattr(self, component), **nested_overrides.pop(component)
                )
        new_fields.update(nested_overrides)

        return replace(self, **new_fields)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format.

        Non-serializable fields (such as ``adapter.scalar_factory``) are omitted.
        """
        def _dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, "__dataclass_fields__"):
                result: Dict[str, Any] = {}
                for f in fields(obj):
                    if f.metadata.get(_SERIALIZE, True):
                        result[f.name] = _dataclass_to_dict(getattr(obj, f.name))
                return result
            if isinstance(obj, (list, tuple)):
                return [_dataclass_to_dict(item) for item in obj]
            return obj

        return _dataclass_to_dict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenderConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected so that typos do not silently fall back to
        defaults.
        """
        components = {"adapter": AdapterConfig, "environment": EnvironmentConfig}
        known = {f.name for f in fields(cls)}

        unknown = [key for key in data if key not in known]
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration keys: {sorted(unknown)}",
                suggestions=[f"Valid keys are {sorted(known)}"]
            )

        values: Dict[str, Any] = {}
        for key, value in data.items():
            if key in components:
                try:
                    values[key] = components[key](**value)
                except (TypeError, ValueError) as e:
                    raise ConfigValidationError(str(e), field_name=key) from e
            else:
                values[key] = value

        return cls(**values)

    @classmethod
    def from_json(cls, json_str: str) -> "RenderConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))

    def validate_compatibility(self, other: "RenderConfig") -> List[str]:
        """List behavioral differences that would change rendered output."""
        warnings = []

        if self.environment.autoescape != other.environment.autoescape:
            warnings.append("Autoescape settings differ - output escaping will change")
        if self.environment.undefined != other.environment.undefined:
            warnings.append("Undefined handling differs - missing values may raise")
        if self.adapter.escape_scalars != other.adapter.escape_scalars:
            warnings.append("Scalar escaping differs - attribute values may be double-escaped")

        return warnings

    # Preset factory methods
    @classmethod
    def html(cls) -> "RenderConfig":
        """Create preset for rendering HTML/XML output with escaping enabled."""
        return cls(
            adapter=AdapterConfig(escape_scalars=True),
            environment=EnvironmentConfig(autoescape=True),
            name="html",
        )

    @classmethod
    def strict(cls) -> "RenderConfig":
        """Create preset that fails on any missing attribute or variable."""
        return cls(
            environment=EnvironmentConfig(undefined="strict"),
            name="strict",
        )

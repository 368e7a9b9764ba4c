"""Capability protocols exposed to the template engine.

Each adapter type satisfies the protocols that apply to it structurally;
there is no common base class.
"""

from typing import Any, Collection, Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class HashModel(Protocol):
    """Lookup of values by string key."""

    def get(self, key: Optional[str]) -> Any:
        """Return the value for ``key``, an empty sequence, or ``None``."""
        ...

    def is_empty(self) -> bool:
        ...


@runtime_checkable
class HashModelEx(HashModel, Protocol):
    """Hash lookup that can also enumerate its keys and values."""

    def keys(self) -> Collection[str]:
        ...

    def values(self) -> Collection[str]:
        ...


@runtime_checkable
class SequenceModel(Protocol):
    """Fixed-size, 0-indexed, read-only sequence."""

    def __getitem__(self, index: Any) -> Any:
        ...

    def __len__(self) -> int:
        ...


@runtime_checkable
class ScalarModel(Protocol):
    """Value that renders as a single string."""

    def as_string(self) -> str:
        ...


@runtime_checkable
class NodeModel(Protocol):
    """Node in a navigable tree."""

    @property
    def parent_node(self) -> Optional["NodeModel"]:
        ...

    @property
    def child_nodes(self) -> SequenceModel:
        ...

    @property
    def node_name(self) -> str:
        ...

    @property
    def node_type(self) -> str:
        ...

    @property
    def node_namespace(self) -> Optional[str]:
        ...


@runtime_checkable
class AdapterModel(Protocol):
    """Wrapper that can hand back the object it adapts."""

    @property
    def adapted_object(self) -> Any:
        ...


TemplateValue = Union[HashModel, SequenceModel, ScalarModel, None]

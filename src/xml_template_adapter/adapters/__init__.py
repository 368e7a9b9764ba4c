"""Adapters presenting document trees to the template engine.

Key Components:
    NodeAdapter: Hash/sequence/scalar/node view over one element
    AttributeAdapter: Node/sequence/scalar view over one attribute
    TextAdapter: Node/sequence/scalar view over an element's text
    NodeListAdapter: Read-only sequence of adapters
    wrap_node: None-safe factory for NodeAdapter
"""

from .nodes import (
    ATTRIBUTE_MARKER,
    TEXT_KEY,
    TEXT_NODE_NAME,
    AttributeAdapter,
    NodeAdapter,
    NodeListAdapter,
    TextAdapter,
    wrap_node,
)
from .protocols import (
    AdapterModel,
    HashModel,
    HashModelEx,
    NodeModel,
    ScalarModel,
    SequenceModel,
)
from .scalars import to_native_scalar

__all__ = [
    "ATTRIBUTE_MARKER",
    "TEXT_KEY",
    "TEXT_NODE_NAME",
    "AttributeAdapter",
    "NodeAdapter",
    "NodeListAdapter",
    "TextAdapter",
    "wrap_node",
    "AdapterModel",
    "HashModel",
    "HashModelEx",
    "NodeModel",
    "ScalarModel",
    "SequenceModel",
    "to_native_scalar",
]

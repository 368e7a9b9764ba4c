"""XML Template Adapter.

Presents already-built XML element trees to the Jinja2 template engine as
hash, sequence, scalar and node values, without converting the tree into
template-native data up front.

Progressive API Disclosure:
- Level 1: Simple functions - wrap_node(), render_string()
- Level 2: Configured renderer - NodeTemplateRenderer with RenderConfig
- Level 3: Direct adapter use - NodeAdapter and friends, NodeEnvironment
"""

__version__ = "0.1.0"
__author__ = "XML Template Adapter Team"

from .adapters import (
    AttributeAdapter,
    NodeAdapter,
    NodeListAdapter,
    TextAdapter,
    wrap_node,
)
from .rendering import NodeEnvironment, NodeTemplateRenderer, render_string
from .shared import (
    AdapterConfig,
    AdapterError,
    EnvironmentConfig,
    NodeIndexError,
    RenderConfig,
    WrappingError,
)
from .tree import XMLElement, element_from_etree

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple functions
    "wrap_node",
    "render_string",

    # Level 2: Configured renderer
    "NodeTemplateRenderer",
    "RenderConfig",
    "AdapterConfig",
    "EnvironmentConfig",

    # Level 3: Adapters and environment
    "NodeAdapter",
    "AttributeAdapter",
    "TextAdapter",
    "NodeListAdapter",
    "NodeEnvironment",

    # Tree model
    "XMLElement",
    "element_from_etree",

    # Errors
    "AdapterError",
    "NodeIndexError",
    "WrappingError",
]

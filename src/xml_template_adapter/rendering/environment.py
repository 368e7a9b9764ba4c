"""Jinja2 environment that resolves names on adapted nodes.

Jinja2 resolves ``node.name`` through ``getattr`` before subscription, which
would let adapter properties shadow child elements of the same name. The
environment here reverses that order for ``NodeAdapter`` values:

* an attribute key, text key or child-group name present on the node wins;
* otherwise a public adapter property (``parent_node``, ``node_name``, ...)
  is used;
* otherwise the node's own lookup policy applies, so an unknown child name
  is an empty sequence and an unknown attribute is undefined.
"""

from typing import Any, Dict, Type

from jinja2 import ChainableUndefined, Environment, StrictUndefined, Undefined

from xml_template_adapter.adapters import NodeAdapter
from xml_template_adapter.shared import EnvironmentConfig, RenderConfig

UNDEFINED_TYPES: Dict[str, Type[Undefined]] = {
    "default": Undefined,
    "strict": StrictUndefined,
    "chainable": ChainableUndefined,
}


class NodeEnvironment(Environment):
    """Environment whose attribute and item access understand ``NodeAdapter``."""

    def getattr(self, obj: Any, attribute: str) -> Any:
        if isinstance(obj, NodeAdapter):
            return self._lookup_node(obj, attribute)
        return super().getattr(obj, attribute)

    def getitem(self, obj: Any, argument: Any) -> Any:
        if isinstance(obj, NodeAdapter) and isinstance(argument, str):
            return self._lookup_node(obj, argument)
        return super().getitem(obj, argument)

    def _lookup_node(self, node: NodeAdapter, key: str) -> Any:
        if key not in node and not key.startswith("_"):
            try:
                return getattr(node, key)
            except AttributeError:
                pass

        value = node.get(key)
        if value is None:
            return self.undefined(obj=node, name=key)
        return value


def create_environment(config: RenderConfig, **options: Any) -> NodeEnvironment:
    """Build a ``NodeEnvironment`` from a render configuration.

    Args:
        config: Render configuration
        **options: Extra ``jinja2.Environment`` arguments (e.g. ``loader``)

    Returns:
        Configured environment
    """
    env_config: EnvironmentConfig = config.environment
    return NodeEnvironment(
        autoescape=env_config.autoescape,
        undefined=UNDEFINED_TYPES[env_config.undefined],
        trim_blocks=env_config.trim_blocks,
        lstrip_blocks=env_config.lstrip_blocks,
        keep_trailing_newline=env_config.keep_trailing_newline,
        newline_sequence=env_config.newline_sequence,
        **options,
    )

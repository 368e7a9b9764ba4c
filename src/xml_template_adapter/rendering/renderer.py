"""Template rendering over adapted document trees.

Provides a renderer class that wraps ``XMLElement`` context values in
``NodeAdapter`` instances and renders Jinja2 templates against them, plus a
module-level convenience function for one-off renders.
"""

import logging
import time
from typing import Any, Dict, Mapping, Optional

from jinja2 import BaseLoader, Template

from xml_template_adapter.adapters import wrap_node
from xml_template_adapter.shared import RenderConfig, get_logger
from xml_template_adapter.tree import XMLElement

from .environment import NodeEnvironment, create_environment

MS_PER_SECOND = 1000


class NodeTemplateRenderer:
    """Render Jinja2 templates against document trees.

    ``XMLElement`` values passed in the context are wrapped once per render
    call; every other value is passed through unchanged. Errors raised by the
    template or by the adapters are logged and re-raised.

    Examples:
        >>> item = XMLElement(tag="item", attributes={"qty": "3"}, text="widget")
        >>> NodeTemplateRenderer().render_string("{{ item['@qty'] }}x {{ item }}", item=item)
        '3x widget'
    """

    def __init__(self,
                 config: Optional[RenderConfig] = None,
                 loader: Optional[BaseLoader] = None) -> None:
        """Initialize renderer.

        Args:
            config: Render configuration; defaults apply when omitted
            loader: Optional Jinja2 loader for ``render`` by template name
        """
        self.config = config or RenderConfig()
        self.logger = get_logger(__name__, self.config.correlation_id, "node_renderer")
        self._log_level: int = getattr(logging, self.config.logging_level)
        self.environment: NodeEnvironment = create_environment(self.config, loader=loader)

    def wrap_context(self, context: Mapping[str, Any]) -> Dict[str, Any]:
        """Wrap every ``XMLElement`` value of a template context."""
        wrapped: Dict[str, Any] = {}
        for key, value in context.items():
            if isinstance(value, XMLElement):
                wrapped[key] = wrap_node(value, self.config.adapter)
            else:
                wrapped[key] = value

        if self._emits(logging.DEBUG):
            self.logger.debug(
                "Template context wrapped",
                extra={
                    "context_keys": sorted(wrapped),
                    "wrapped_nodes": sum(
                        1 for value in context.values() if isinstance(value, XMLElement)
                    ),
                }
            )
        return wrapped

    def render_string(self, source: str, **context: Any) -> str:
        """Render a template given as source text."""
        template = self.environment.from_string(source)
        return self._render(template, "<string>", context)

    def render(self, template_name: str, **context: Any) -> str:
        """Render a template resolved through the configured loader."""
        template = self.environment.get_template(template_name)
        return self._render(template, template_name, context)

    def _emits(self, level: int) -> bool:
        # Level policy of the logger itself belongs to the application
        return level >= self._log_level

    def _render(self, template: Template, name: str, context: Mapping[str, Any]) -> str:
        start_time = time.time()

        if self._emits(logging.INFO):
            self.logger.info(
                "Starting template render",
                extra={"template": name, "context_size": len(context)}
            )

        try:
            output = template.render(self.wrap_context(context))
        except Exception:
            if self._emits(logging.ERROR):
                self.logger.exception(
                    "Template render failed",
                    extra={
                        "template": name,
                        "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
                    }
                )
            raise

        if self._emits(logging.INFO):
            self.logger.info(
                "Template render completed",
                extra={
                    "template": name,
                    "output_length": len(output),
                    "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
                }
            )
        return output


def render_string(source: str,
                  config: Optional[RenderConfig] = None,
                  **context: Any) -> str:
    """Render template source against a context, wrapping any tree elements.

    Args:
        source: Jinja2 template source
        config: Optional render configuration
        **context: Template variables; ``XMLElement`` values are adapted

    Returns:
        Rendered output
    """
    return NodeTemplateRenderer(config).render_string(source, **context)

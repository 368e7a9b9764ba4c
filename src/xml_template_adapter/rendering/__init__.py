"""Jinja2 integration for adapted document trees."""

from .environment import NodeEnvironment, create_environment
from .renderer import NodeTemplateRenderer, render_string

__all__ = [
    "NodeEnvironment",
    "NodeTemplateRenderer",
    "create_environment",
    "render_string",
]

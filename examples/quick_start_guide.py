#!/usr/bin/env python3
"""
Quick Start Guide for the XML Template Adapter.

Shows how element trees are exposed to Jinja2 templates: attribute lookup,
child groups, simple-content text and parent navigation.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from xml_template_adapter import (
    NodeTemplateRenderer,
    RenderConfig,
    XMLElement,
    wrap_node,
)

INVOICE_TEMPLATE = """\
Invoice {{ book['@id'] }} ({{ book['@genre'] }})
{% for child in book %}
  {{ child.node_name }}: {{ child }}{% if child['@currency'] is defined %} {{ child['@currency'] }}{% endif %}

{% endfor %}
Reviews: {{ book.review|length }}
"""


def build_book() -> XMLElement:
    """Create a small <book> tree."""
    return XMLElement(
        tag="book",
        attributes={"id": "123", "genre": "fiction"},
        children=[
            XMLElement(tag="title", text="My Book"),
            XMLElement(tag="author", text="John Doe"),
            XMLElement(tag="price", attributes={"currency": "USD"}, text="19.99"),
        ],
    )


def adapter_example():
    """Use the adapters directly."""
    print("QUICK START - Adapters")
    print("=" * 40)

    node = wrap_node(build_book())

    print(f"Attribute @id:        {node['@id']}")
    print(f"Missing attribute:    {node['@isbn']}")
    print(f"Missing child group:  {len(node['review'])} entries")
    print(f"Children:             {[child.node_name for child in node]}")
    print(f"Title text:           {node['title'][0]}")
    print(f"Price parent:         {node['price'][0].parent_node.node_name}")
    print(f"Display string:\n{node.display_string()}")


def template_example():
    """Render a Jinja2 template over the tree."""
    print("\nQUICK START - Templates")
    print("=" * 40)

    renderer = NodeTemplateRenderer(RenderConfig(correlation_id="quick-start"))
    print(renderer.render_string(INVOICE_TEMPLATE, book=build_book()))


def main():
    """Main function."""
    adapter_example()
    template_example()
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Human-readable XML rendering of document trees.

Used for element display strings and diagnostics; not a general purpose
serializer (no declaration, no namespace handling).
"""

from .element import XMLElement


def escape_xml_text(text: str) -> str:
    """Escape XML text content."""
    return (text
            .replace('&', '&amp;')
            .replace('<', '&lt;')
            .replace('>', '&gt;'))


def escape_xml_attribute(value: str) -> str:
    """Escape XML attribute value."""
    return (value
            .replace('&', '&amp;')
            .replace('<', '&lt;')
            .replace('>', '&gt;')
            .replace('"', '&quot;')
            .replace("'", '&#39;'))


def format_element(element: XMLElement,
                   pretty: bool = True,
                   indent: str = "  ",
                   indent_level: int = 0) -> str:
    """Format a single element and its subtree as an XML string.

    Args:
        element: Element to format
        pretty: Put each child element on its own indented line
        indent: Indentation unit used when ``pretty`` is set
        indent_level: Nesting level of ``element``

    Returns:
        XML markup for the element
    """
    pad = indent * indent_level if pretty else ""

    tag_parts = [element.tag]
    for name, value in element.attributes.items():
        if value is None:
            continue
        tag_parts.append(f'{name}="{escape_xml_attribute(value)}"')
    opening = ' '.join(tag_parts)

    if not element.text and not element.children:
        return f"{pad}<{opening}/>"

    if not element.children:
        return f"{pad}<{opening}>{escape_xml_text(element.text)}</{element.tag}>"

    content_parts = []
    if element.text:
        text_pad = pad + indent if pretty else ""
        content_parts.append(f"{text_pad}{escape_xml_text(element.text)}")

    for child in element.children:
        content_parts.append(
            format_element(child, pretty, indent, indent_level + 1 if pretty else 0)
        )

    separator = "\n" if pretty else ""
    return separator.join(
        [f"{pad}<{opening}>", *content_parts, f"{pad}</{element.tag}>"]
    )

"""Document tree model wrapped by the template adapters.

Key Components:
    XMLElement: Element with attributes, ordered children, text and parent link
    format_element: Human-readable XML rendering used for display strings
    element_from_etree: Build an XMLElement tree from xml.etree.ElementTree
"""

from .convert import element_from_etree
from .element import XMLElement
from .formatting import format_element

__all__ = [
    "XMLElement",
    "element_from_etree",
    "format_element",
]

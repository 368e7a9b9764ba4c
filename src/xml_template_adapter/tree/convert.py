"""Conversion from ``xml.etree.ElementTree`` elements to ``XMLElement`` trees."""

import xml.etree.ElementTree as ET
from typing import Optional

from .element import XMLElement


def element_from_etree(source: ET.Element,
                       parent: Optional[XMLElement] = None) -> XMLElement:
    """Convert an already-parsed ElementTree element to an ``XMLElement``.

    Leading text that is empty or whitespace only becomes ``None`` so that
    indentation between child elements does not turn a structural element
    into simple content. Comments and processing instructions are skipped.
    Tail text is not kept, so mixed content such as ``<p>a <b>x</b> c</p>``
    loses the text that follows each child element.

    Args:
        source: ElementTree element to convert
        parent: Parent for the converted element, if any

    Returns:
        Root of the converted subtree
    """
    text = source.text
    if text is not None and not text.strip():
        text = None

    element = XMLElement(
        tag=source.tag,
        attributes=dict(source.attrib),
        text=text,
        parent=parent,
    )

    for child in source:
        if not isinstance(child.tag, str):
            continue
        element.add_child(element_from_etree(child, element))

    return element

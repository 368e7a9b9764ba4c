"""Document tree model consumed by the template adapters.

This module implements the element structure the adapters wrap: a tag name,
an attribute mapping, ordered children with a by-name grouping, optional text
content and a parent link.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(eq=False)
class XMLElement:
    """Represents a single XML element in the document tree.

    ``text`` distinguishes absent content (``None``) from empty content
    (``""``). Children added through ``add_child``/``insert_child`` or passed
    to the constructor get their ``parent`` link set to this element.
    """

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    text: Optional[str] = None
    children: List["XMLElement"] = field(default_factory=list, repr=False)
    parent: Optional["XMLElement"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate element values and establish parent-child relationships."""
        if not self.tag:
            raise ValueError("Element tag cannot be empty")

        for child in self.children:
            child.parent = self

    @property
    def name(self) -> str:
        """Element name; alias of ``tag``."""
        return self.tag

    @property
    def children_by_name(self) -> Dict[str, List["XMLElement"]]:
        """Direct children grouped by tag, groups ordered by first occurrence."""
        groups: Dict[str, List[XMLElement]] = {}
        for child in self.children:
            groups.setdefault(child.tag, []).append(child)
        return groups

    def add_child(self, child: "XMLElement") -> None:
        """Add a child element and establish parent relationship."""
        if not isinstance(child, XMLElement):
            raise TypeError("Child must be an XMLElement instance")

        child.parent = self
        self.children.append(child)

    def remove_child(self, child: "XMLElement") -> bool:
        """Remove a child element and clear parent relationship."""
        for i, existing in enumerate(self.children):
            if existing is child:
                del self.children[i]
                child.parent = None
                return True
        return False

    def insert_child(self, index: int, child: "XMLElement") -> None:
        """Insert child element at specific index."""
        if not isinstance(child, XMLElement):
            raise TypeError("Child must be an XMLElement instance")
        if not (0 <= index <= len(self.children)):
            raise IndexError("Child index out of range")

        child.parent = self
        self.children.insert(index, child)

    def find_child(self, tag: str) -> Optional["XMLElement"]:
        """Find first direct child with matching tag name."""
        for child in self.children:
            if child.tag == tag:
                return child
        return None

    def find_children(self, tag: str) -> List["XMLElement"]:
        """Find all direct children with matching tag name."""
        return [child for child in self.children if child.tag == tag]

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get attribute value with optional default."""
        return self.attributes.get(name, default)

    def set_attribute(self, name: str, value: str) -> None:
        """Set attribute value."""
        if not isinstance(name, str) or not isinstance(value, str):
            raise TypeError("Attribute name and value must be strings")
        self.attributes[name] = value

    def has_attribute(self, name: str) -> bool:
        """Check if element has specific attribute."""
        return name in self.attributes

    def get_path(self) -> str:
        """Get XPath-like path to this element."""
        if self.parent is None:
            return f"/{self.tag}"

        parent_path = self.parent.get_path()
        siblings = self.parent.find_children(self.tag)
        if len(siblings) > 1:
            position = next(
                (i for i, sibling in enumerate(siblings, 1) if sibling is self), 1
            )
            return f"{parent_path}/{self.tag}[{position}]"

        return f"{parent_path}/{self.tag}"

    def get_depth(self) -> int:
        """Get depth of this element in the tree (root = 0)."""
        if self.parent is None:
            return 0
        return self.parent.get_depth() + 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert element to dictionary representation."""
        result: Dict[str, Any] = {
            "tag": self.tag,
            "attributes": dict(self.attributes),
        }

        if self.text is not None:
            result["text"] = self.text

        if self.children:
            result["children"] = [child.to_dict() for child in self.children]

        return result

    def __str__(self) -> str:
        from .formatting import format_element

        return format_element(self)

"""Template-engine adapters over ``XMLElement`` trees.

A ``NodeAdapter`` presents one element to the template engine as a hash
(attributes under ``"@name"`` keys, child groups under their tag name), as a
sequence (all children, or the text for simple-content elements), as a scalar
(its text) and as a navigable node. Attribute and text values get their own
adapters with the same node/sequence/scalar shape.

Lookup results follow a deliberate asymmetry: a missing attribute yields
``None`` while a missing child group yields an empty sequence, so templates
can loop over absent children without guarding them first.

Adapters snapshot the element when they are built and fill two caches lazily
(parent wrapper, all-children sequence). They do not observe later mutation
of the tree; build new adapters for each render pass if the tree changes.
Instances are meant to be used from a single thread.
"""

from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    KeysView,
    List,
    Optional,
    Sequence,
    Tuple,
    Union,
    ValuesView,
)

from xml_template_adapter.shared import AdapterConfig, NodeIndexError
from xml_template_adapter.tree import XMLElement

from .scalars import to_native_scalar

ATTRIBUTE_MARKER = "@"
TEXT_KEY = "@@text"
TEXT_NODE_NAME = "@text"

ELEMENT_NODE = "element"
ATTRIBUTE_NODE = "attribute"
TEXT_NODE = "text"

Adapter = Union["NodeAdapter", "AttributeAdapter", "TextAdapter"]


def wrap_node(element: Optional[XMLElement],
              config: Optional[AdapterConfig] = None) -> Optional["NodeAdapter"]:
    """Wrap an element for the template engine; ``None`` stays ``None``."""
    if element is None:
        return None
    return NodeAdapter(element, config=config)


def _check_index(index: Any, size: int) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Sequence indices must be integers, not {type(index).__name__}")
    if index < 0 or index >= size:
        raise NodeIndexError(
            f"Index [{index}] out of range for sequence of size [{size}]", index
        )
    return index


class NodeListAdapter:
    """Ordered, fixed-size, read-only sequence of adapters."""

    __slots__ = ("_items",)

    def __init__(self, adapters: Iterable[Adapter] = ()) -> None:
        self._items: Tuple[Adapter, ...] = tuple(adapters)

    @classmethod
    def from_elements(cls,
                      elements: Sequence[XMLElement],
                      parent: Optional["NodeAdapter"],
                      config: Optional[AdapterConfig] = None) -> "NodeListAdapter":
        """Wrap each element, handing every wrapper the same parent adapter."""
        adapters = [NodeAdapter._unpopulated(element, parent, config) for element in elements]
        for adapter in adapters:
            _populate_subtree(adapter)
        return cls(adapters)

    @classmethod
    def from_text(cls,
                  text: Optional[str],
                  parent: Optional["NodeAdapter"],
                  config: Optional[AdapterConfig] = None) -> "NodeListAdapter":
        """Build a one-entry sequence holding a text adapter."""
        return cls((TextAdapter(text, parent, config),))

    def __getitem__(self, index: int) -> Adapter:
        return self._items[_check_index(index, len(self._items))]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Adapter]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeListAdapter):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def as_string(self) -> str:
        """Concatenated scalar strings of the entries; empty for no entries."""
        return "".join(item.as_string() for item in self._items)

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return f"NodeListAdapter({list(self._items)!r})"


_EMPTY_NODE_LIST = NodeListAdapter()


def _populate_subtree(root: "NodeAdapter") -> None:
    # Explicit work stack; tree depth must not be bounded by the recursion limit
    pending = [root]
    while pending:
        pending.extend(pending.pop()._fill_keys())


class NodeAdapter:
    """Hash, sequence, scalar and node view over a single ``XMLElement``.

    Keys:
        ``"@name"``  attribute ``name`` as an ``AttributeAdapter``
        ``"@@text"`` the element text as a ``TextAdapter``
        ``"tag"``    the child elements named ``tag`` as a ``NodeListAdapter``

    Integer indexes address the all-children sequence: the element children
    in document order, or a single text entry when the element has non-empty
    text.
    """

    def __init__(self,
                 element: XMLElement,
                 parent: Optional["NodeAdapter"] = None,
                 config: Optional[AdapterConfig] = None) -> None:
        self._setup(element, parent, config)
        _populate_subtree(self)

    @classmethod
    def _unpopulated(cls,
                     element: XMLElement,
                     parent: Optional["NodeAdapter"],
                     config: Optional[AdapterConfig]) -> "NodeAdapter":
        adapter = cls.__new__(cls)
        adapter._setup(element, parent, config)
        return adapter

    def _setup(self,
               element: XMLElement,
               parent: Optional["NodeAdapter"],
               config: Optional[AdapterConfig]) -> None:
        self._element = element
        self._parent = parent
        self._config = config
        self._all_children: Optional[NodeListAdapter] = None
        self._attrs_and_children: Dict[str, Any] = {}

    def _fill_keys(self) -> List["NodeAdapter"]:
        """Fill attribute and child-group entries; return the new child adapters."""
        for attr_name, attr_value in self._element.attributes.items():
            if attr_value is not None:
                self._attrs_and_children[ATTRIBUTE_MARKER + attr_name] = AttributeAdapter(
                    attr_name, attr_value, self, self._config
                )

        created: List[NodeAdapter] = []
        for child_name, children in self._element.children_by_name.items():
            group = [NodeAdapter._unpopulated(child, self, self._config) for child in children]
            self._attrs_and_children[child_name] = NodeListAdapter(group)
            created.extend(group)
        return created

    @property
    def element(self) -> XMLElement:
        """The wrapped element."""
        return self._element

    @property
    def adapted_object(self) -> XMLElement:
        return self._element

    # Hash access

    def get(self, key: Optional[str]) -> Any:
        """Look up an attribute, the text, or a child group by key.

        Returns:
            The cached adapter for ``key``; ``None`` for an unknown attribute
            key; an empty ``NodeListAdapter`` for an unknown child name.
        """
        if key is None:
            return None

        found = self._attrs_and_children.get(key)
        if found is not None:
            return found

        if key.startswith(ATTRIBUTE_MARKER):
            if key == TEXT_KEY:
                text_adapter = TextAdapter(self._element.text, self, self._config)
                self._attrs_and_children[TEXT_KEY] = text_adapter
                return text_adapter
            return None

        return _EMPTY_NODE_LIST

    def is_empty(self) -> bool:
        """True when the element has no attributes, no children and no text."""
        return (
            not self._element.attributes
            and not self._element.children
            and not self._element.text
        )

    def keys(self) -> KeysView[str]:
        """Attribute names."""
        return dict(self._element.attributes).keys()

    def values(self) -> ValuesView[str]:
        """Attribute values."""
        return dict(self._element.attributes).values()

    # Node navigation

    @property
    def parent_node(self) -> Optional["NodeAdapter"]:
        if self._parent is None:
            self._parent = wrap_node(self._element.parent, self._config)
        return self._parent

    @property
    def child_nodes(self) -> "NodeAdapter":
        return self

    @property
    def node_name(self) -> str:
        return self._element.tag

    @property
    def node_type(self) -> str:
        return ELEMENT_NODE

    @property
    def node_namespace(self) -> Optional[str]:
        """Always ``None``; namespaces are not supported."""
        return None

    # Sequence access

    def _sequence(self) -> NodeListAdapter:
        # Attributes are not part of the child sequence
        if self._all_children is None:
            if self._element.text:
                self._all_children = NodeListAdapter.from_text(
                    self._element.text, self, self._config
                )
            else:
                self._all_children = NodeListAdapter.from_elements(
                    self._element.children, self, self._config
                )
        return self._all_children

    def __getitem__(self, key: Union[str, int]) -> Any:
        if isinstance(key, str):
            return self.get(key)
        return self._sequence()[key]

    def __len__(self) -> int:
        return len(self._sequence())

    def __iter__(self) -> Iterator[Adapter]:
        return iter(self._sequence())

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __contains__(self, key: object) -> bool:
        # String keys test the hash side; anything else tests the sequence
        if isinstance(key, str):
            return key in self._attrs_and_children
        return key in self._sequence()

    # Scalar access

    def as_string(self) -> str:
        text = self._element.text
        return text if text is not None else ""

    def display_string(self) -> str:
        """Structural rendering of the wrapped element."""
        return str(self._element)

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return self.display_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeAdapter):
            return NotImplemented
        return self._element is other._element

    def __hash__(self) -> int:
        return id(self._element)


class AttributeAdapter:
    """Node, one-entry sequence and scalar view over a single attribute."""

    __slots__ = ("_name", "_value", "_parent", "_config")

    def __init__(self,
                 name: str,
                 value: str,
                 parent: Optional[NodeAdapter],
                 config: Optional[AdapterConfig] = None) -> None:
        self._name = name
        self._value = value
        self._parent = parent
        self._config = config

    @property
    def adapted_object(self) -> str:
        return self._value

    @property
    def parent_node(self) -> Optional[NodeAdapter]:
        return self._parent

    @property
    def child_nodes(self) -> "AttributeAdapter":
        return self

    @property
    def node_name(self) -> str:
        return self._name

    @property
    def node_type(self) -> str:
        return ATTRIBUTE_NODE

    @property
    def node_namespace(self) -> Optional[str]:
        return None

    def __getitem__(self, index: int) -> Any:
        if index == 0 and not isinstance(index, bool):
            return to_native_scalar(self._value, self._config)
        raise NodeIndexError(
            f"Attribute node only has 1 value. Tried to get index [{index}] "
            f"for attribute [{self._name}]",
            index,
            self._name,
        )

    def __len__(self) -> int:
        return 1

    def __iter__(self) -> Iterator[Any]:
        yield self[0]

    def __bool__(self) -> bool:
        return bool(self._value)

    def as_string(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"AttributeAdapter({self._name!r}, {self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeAdapter):
            return NotImplemented
        return (
            self._name == other._name
            and self._value == other._value
            and self._parent == other._parent
        )

    def __hash__(self) -> int:
        return hash((self._name, self._value))


class TextAdapter:
    """Node, one-entry sequence and scalar view over an element's text."""

    __slots__ = ("_text", "_parent", "_config")

    def __init__(self,
                 text: Optional[str],
                 parent: Optional[NodeAdapter],
                 config: Optional[AdapterConfig] = None) -> None:
        self._text = text
        self._parent = parent
        self._config = config

    @property
    def adapted_object(self) -> Optional[str]:
        return self._text

    @property
    def parent_node(self) -> Optional[NodeAdapter]:
        return self._parent

    @property
    def child_nodes(self) -> "TextAdapter":
        return self

    @property
    def node_name(self) -> str:
        return TEXT_NODE_NAME

    @property
    def node_type(self) -> str:
        return TEXT_NODE

    @property
    def node_namespace(self) -> Optional[str]:
        return None

    def __getitem__(self, index: int) -> Any:
        if index == 0 and not isinstance(index, bool):
            return to_native_scalar(self.as_string(), self._config)
        raise NodeIndexError(
            f"Text node only has 1 value. Tried to get index [{index}]", index
        )

    def __len__(self) -> int:
        return 1

    def __iter__(self) -> Iterator[Any]:
        yield self[0]

    def __bool__(self) -> bool:
        return bool(self._text)

    def as_string(self) -> str:
        return self._text if self._text is not None else ""

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return f"TextAdapter({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextAdapter):
            return NotImplemented
        return self.as_string() == other.as_string() and self._parent == other._parent

    def __hash__(self) -> int:
        return hash(self.as_string())

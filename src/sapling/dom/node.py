"""DOM model: Node with Text or Element payload."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

AttrMap = dict[str, str]


class NodeKind(Enum):
    """Discriminant for the two node variants."""

    TEXT = "text"
    ELEMENT = "element"


@dataclass(frozen=True)
class Text:
    """Payload of a text leaf."""

    content: str


@dataclass(frozen=True)
class ElementData:
    """Payload of an element: tag name plus attribute map."""

    tag_name: str
    attributes: AttrMap = field(default_factory=dict)


@dataclass(frozen=True)
class Node:
    """A single node in the document tree.

    Children are owned by their parent and kept in document order. Nodes
    are built bottom-up by the parser and never mutated afterwards.
    """

    node_type: Text | ElementData
    children: tuple[Node, ...] = ()

    @classmethod
    def new_text(cls, content: str) -> Node:
        return cls(node_type=Text(content))

    @classmethod
    def new_element(
        cls,
        tag_name: str,
        attributes: Mapping[str, str] | None = None,
        children: Iterable[Node] = (),
    ) -> Node:
        return cls(
            node_type=ElementData(tag_name=tag_name, attributes=dict(attributes or {})),
            children=tuple(children),
        )

    # --- accessors ------------------------------------------------------------

    @property
    def node_kind(self) -> NodeKind:
        if isinstance(self.node_type, Text):
            return NodeKind.TEXT
        return NodeKind.ELEMENT

    @property
    def is_text(self) -> bool:
        return self.node_kind is NodeKind.TEXT

    @property
    def is_element(self) -> bool:
        return self.node_kind is NodeKind.ELEMENT

    @property
    def tag_name(self) -> str | None:
        """Return the element's tag name, or None for text nodes."""
        if isinstance(self.node_type, ElementData):
            return self.node_type.tag_name
        return None

    @property
    def text(self) -> str | None:
        """Return the text content, or None for elements."""
        if isinstance(self.node_type, Text):
            return self.node_type.content
        return None

    @property
    def attributes(self) -> Mapping[str, str]:
        """Read-only view of the element's attributes (empty for text)."""
        if isinstance(self.node_type, ElementData):
            return MappingProxyType(self.node_type.attributes)
        return MappingProxyType({})

    def depth_first(self) -> Iterator[Node]:
        """Traverse the tree depth-first, yielding self then children."""
        yield self
        for child in self.children:
            yield from child.depth_first()

"""DOM layer -- public type re-exports."""

from sapling.dom.node import AttrMap, ElementData, Node, NodeKind, Text
from sapling.dom.render import format_tree, to_dict

__all__ = [
    "AttrMap",
    "ElementData",
    "Node",
    "NodeKind",
    "Text",
    "format_tree",
    "to_dict",
]

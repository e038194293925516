"""Human-readable and JSON-friendly renderings of a DOM tree."""

from __future__ import annotations

from typing import Any

from sapling.dom.node import Node


def format_tree(root: Node, indent: str = "  ") -> str:
    """Render *root* as an indented outline, one node per line.

    Elements print as ``<tag key="value">``, text nodes as their repr so
    surrounding whitespace stays visible.
    """
    lines: list[str] = []
    _format_node(root, 0, indent, lines)
    return "\n".join(lines)


def _format_node(node: Node, depth: int, indent: str, lines: list[str]) -> None:
    prefix = indent * depth
    if node.is_text:
        lines.append(f"{prefix}{node.text!r}")
        return

    attrs = "".join(f' {k}="{v}"' for k, v in sorted(node.attributes.items()))
    lines.append(f"{prefix}<{node.tag_name}{attrs}>")
    for child in node.children:
        _format_node(child, depth + 1, indent, lines)


def to_dict(node: Node) -> dict[str, Any]:
    """Convert *node* and its subtree into plain dicts and lists."""
    if node.is_text:
        return {"type": "text", "content": node.text}
    return {
        "type": "element",
        "tag_name": node.tag_name,
        "attributes": dict(node.attributes),
        "children": [to_dict(child) for child in node.children],
    }

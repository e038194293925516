"""Tests for the DOM node model and tree rendering."""

import pytest

from sapling.dom import Node, NodeKind, format_tree, to_dict


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestTextNode:
    def test_new_text_has_no_children(self):
        node = Node.new_text("This is some text")
        assert node.children == ()

    def test_text_accessors(self):
        node = Node.new_text("This is some text")
        assert node.node_kind is NodeKind.TEXT
        assert node.is_text
        assert not node.is_element
        assert node.text == "This is some text"
        assert node.tag_name is None
        assert dict(node.attributes) == {}


class TestElementNode:
    def test_new_element_without_children(self):
        node = Node.new_element("test_elem", {"test_key": "test attribute"})
        assert node.children == ()
        assert node.node_kind is NodeKind.ELEMENT
        assert node.tag_name == "test_elem"
        assert node.text is None

    def test_attributes(self):
        node = Node.new_element("a", {"href": "x", "class": "y"})
        assert node.attributes["href"] == "x"
        assert node.attributes["class"] == "y"

    def test_attributes_are_read_only(self):
        node = Node.new_element("a", {"href": "x"})
        with pytest.raises(TypeError):
            node.attributes["href"] = "changed"  # type: ignore[index]

    def test_attributes_copied_from_caller(self):
        attrs = {"id": "one"}
        node = Node.new_element("div", attrs)
        attrs["id"] = "two"
        assert node.attributes["id"] == "one"

    def test_child_access_through_parent(self):
        text = Node.new_text("This is some text")
        node = Node.new_element("test_elem", {}, [text])
        assert len(node.children) == 1
        assert node.children[0].text == "This is some text"

    def test_children_preserve_order(self):
        children = [Node.new_text(str(i)) for i in range(5)]
        node = Node.new_element("ul", {}, children)
        assert [c.text for c in node.children] == ["0", "1", "2", "3", "4"]


class TestImmutability:
    def test_node_is_frozen(self):
        node = Node.new_text("x")
        with pytest.raises(AttributeError):
            node.children = (Node.new_text("y"),)  # type: ignore[misc]

    def test_children_is_tuple(self):
        node = Node.new_element("p", {}, [Node.new_text("x")])
        assert isinstance(node.children, tuple)


class TestTraversal:
    def test_depth_first_order(self):
        tree = Node.new_element("a", {}, [
            Node.new_element("b", {}, [Node.new_text("c")]),
            Node.new_text("d"),
        ])
        seen = [n.tag_name or n.text for n in tree.depth_first()]
        assert seen == ["a", "b", "c", "d"]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestFormatTree:
    def test_outline(self):
        tree = Node.new_element("h1", {"id": "t"}, [
            Node.new_text("Hello, "),
            Node.new_element("i", {}, [Node.new_text("world!")]),
        ])
        assert format_tree(tree) == "\n".join([
            '<h1 id="t">',
            "  'Hello, '",
            "  <i>",
            "    'world!'",
        ])

    def test_custom_indent(self):
        tree = Node.new_element("p", {}, [Node.new_text("x")])
        assert format_tree(tree, indent="\t") == "<p>\n\t'x'"

    def test_attributes_sorted(self):
        tree = Node.new_element("a", {"z": "1", "b": "2"})
        assert format_tree(tree) == '<a b="2" z="1">'


class TestToDict:
    def test_nested(self):
        tree = Node.new_element("p", {"class": "c"}, [Node.new_text("x")])
        assert to_dict(tree) == {
            "type": "element",
            "tag_name": "p",
            "attributes": {"class": "c"},
            "children": [{"type": "text", "content": "x"}],
        }

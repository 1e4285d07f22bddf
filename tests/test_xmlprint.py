import pytest

from splendorui.xmlprint import (
    PRINT_NO_INDENTING,
    NodeType,
    XmlNode,
    print_xml,
)


def _tree():
    doc = XmlNode(NodeType.DOCUMENT)
    root = doc.append(XmlNode(NodeType.ELEMENT, "root"))
    root.set_attribute("id", "7")
    child = root.append(XmlNode(NodeType.ELEMENT, "child"))
    child.append(XmlNode(NodeType.DATA, value="hello"))
    root.append(XmlNode(NodeType.ELEMENT, "empty"))
    return doc


def test_empty_element_is_self_closing():
    assert print_xml(XmlNode(NodeType.ELEMENT, "a"), PRINT_NO_INDENTING) == "<a/>"


def test_text_is_escaped():
    p = XmlNode(NodeType.ELEMENT, "p")
    p.append(XmlNode(NodeType.DATA, value="a<b&c"))
    out = print_xml(p, PRINT_NO_INDENTING)
    assert "a&lt;b&amp;c" in out
    assert out.startswith("<p>")
    assert out.endswith("</p>")


def test_attribute_with_double_quote_uses_single_quotes():
    e = XmlNode(NodeType.ELEMENT, "e")
    e.set_attribute("say", 'x "hi"')
    out = print_xml(e, PRINT_NO_INDENTING)
    assert '"hi"' in out
    assert out.count("'") == 2


def test_attribute_apostrophe_kept_in_double_quotes():
    e = XmlNode(NodeType.ELEMENT, "e")
    e.set_attribute("v", "it's")
    out = print_xml(e, PRINT_NO_INDENTING)
    assert "it's" in out
    assert "&apos;" not in out


def test_no_indent_matches_indented_without_whitespace():
    indented = print_xml(_tree())
    flat = print_xml(_tree(), PRINT_NO_INDENTING)
    assert indented.replace("\t", "").replace("\n", "") == flat
    assert "\n" not in flat


def test_single_data_child_printed_inline():
    p = XmlNode(NodeType.ELEMENT, "p")
    p.append(XmlNode(NodeType.DATA, value="hello"))
    assert print_xml(p).count("\n") == 1


def test_cdata_is_not_escaped():
    c = XmlNode(NodeType.CDATA, value="<x>")
    out = print_xml(c, PRINT_NO_INDENTING)
    assert "<x>" in out
    assert out.startswith("<![CDATA[")


def test_comment_and_doctype():
    comment = print_xml(XmlNode(NodeType.COMMENT, value=" note "), PRINT_NO_INDENTING)
    assert comment.startswith("<!--") and comment.endswith("-->")
    assert " note " in comment
    doctype = print_xml(XmlNode(NodeType.DOCTYPE, value="html"), PRINT_NO_INDENTING)
    assert doctype.startswith("<!DOCTYPE ") and doctype.endswith("html>")


def test_declaration_and_pi():
    decl = XmlNode(NodeType.DECLARATION)
    decl.set_attribute("version", "1.0")
    out = print_xml(decl, PRINT_NO_INDENTING)
    assert out.startswith("<?xml") and out.endswith("?>")
    assert 'version="1.0"' in out
    pi = print_xml(XmlNode(NodeType.PI, "target", "data"), PRINT_NO_INDENTING)
    assert pi.startswith("<?target") and "data" in pi


def test_children_and_attributes_order():
    root = XmlNode(NodeType.ELEMENT, "r")
    for name in ("a", "b", "c"):
        root.append(XmlNode(NodeType.ELEMENT, name))
    root.set_attribute("x", "1")
    root.set_attribute("y", "2")
    assert [c.name for c in root.children()] == ["a", "b", "c"]
    assert [a.name for a in root.attributes()] == ["x", "y"]


def test_set_attribute_replaces_value():
    e = XmlNode(NodeType.ELEMENT, "e")
    e.set_attribute("k", "1")
    e.set_attribute("k", "2")
    attrs = list(e.attributes())
    assert len(attrs) == 1
    assert attrs[0].value == "2"


def test_invalid_children_rejected():
    data = XmlNode(NodeType.DATA, value="x")
    with pytest.raises(ValueError):
        data.append(XmlNode(NodeType.ELEMENT, "e"))
    with pytest.raises(ValueError):
        XmlNode(NodeType.ELEMENT, "e").append(XmlNode(NodeType.DOCUMENT))


def test_node_with_parent_cannot_be_reattached():
    a = XmlNode(NodeType.ELEMENT, "a")
    b = XmlNode(NodeType.ELEMENT, "b")
    child = a.append(XmlNode(NodeType.ELEMENT, "c"))
    assert child.parent is a
    with pytest.raises(ValueError):
        b.append(child)


def test_attributes_rejected_on_data():
    with pytest.raises(ValueError):
        XmlNode(NodeType.DATA, value="x").set_attribute("k", "v")
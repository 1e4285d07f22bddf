"""A small XML node tree and a printer that writes it as text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional

PRINT_NO_INDENTING = 0x1

_ENTITIES = {
    "<": "&lt;",
    ">": "&gt;",
    "'": "&apos;",
    '"': "&quot;",
    "&": "&amp;",
}


class NodeType(Enum):
    DOCUMENT = auto()
    ELEMENT = auto()
    DATA = auto()
    CDATA = auto()
    COMMENT = auto()
    DECLARATION = auto()
    DOCTYPE = auto()
    PI = auto()


_PARENT_TYPES = (NodeType.DOCUMENT, NodeType.ELEMENT)
_ATTRIBUTE_TYPES = (NodeType.ELEMENT, NodeType.DECLARATION)


@dataclass
class XmlAttribute:
    name: str
    value: str


class XmlNode:
    """A node of an XML tree; documents and elements hold children."""

    def __init__(self, type: NodeType, name: str = "", value: str = "") -> None:
        self.type = type
        self.name = name
        self.value = value
        self.parent: Optional[XmlNode] = None
        self._children: list[XmlNode] = []
        self._attributes: list[XmlAttribute] = []

    def append(self, child: XmlNode) -> XmlNode:
        """Add ``child`` as the last child of this node and return it."""
        if self.type not in _PARENT_TYPES:
            raise ValueError(f"a {self.type.name.lower()} node cannot hold children")
        if child.type is NodeType.DOCUMENT:
            raise ValueError("a document cannot be the child of another node")
        if child.parent is not None:
            raise ValueError("node already has a parent")
        child.parent = self
        self._children.append(child)
        return child

    def set_attribute(self, name: str, value: str) -> XmlAttribute:
        """Set an attribute, replacing the value of one with the same name."""
        if self.type not in _ATTRIBUTE_TYPES:
            raise ValueError(f"a {self.type.name.lower()} node cannot hold attributes")
        for attribute in self._attributes:
            if attribute.name == name:
                attribute.value = value
                return attribute
        attribute = XmlAttribute(name, value)
        self._attributes.append(attribute)
        return attribute

    def children(self) -> Iterator[XmlNode]:
        return iter(tuple(self._children))

    def attributes(self) -> Iterator[XmlAttribute]:
        return iter(tuple(self._attributes))


def _expand(text: str, keep: Optional[str] = None) -> str:
    return "".join(ch if ch == keep else _ENTITIES.get(ch, ch) for ch in text)


def _attributes(node: XmlNode) -> str:
    parts = []
    for attribute in node.attributes():
        if '"' in attribute.value:
            parts.append(f" {attribute.name}='{_expand(attribute.value, chr(34))}'")
        else:
            parts.append(f' {attribute.name}="{_expand(attribute.value, chr(39))}"')
    return "".join(parts)


def _element(node: XmlNode, flags: int, indent: int, tabs: str) -> str:
    out = [tabs, "<", node.name, _attributes(node)]
    children = node._children
    if not node.value and not children:
        out.append("/>")
        return "".join(out)
    out.append(">")
    if not children:
        out.append(_expand(node.value))
    elif len(children) == 1 and children[0].type is NodeType.DATA:
        out.append(_expand(children[0].value))
    else:
        if not flags & PRINT_NO_INDENTING:
            out.append("\n")
        out.extend(_node(child, flags, indent + 1) for child in children)
        out.append(tabs)
    out.append(f"</{node.name}>")
    return "".join(out)


def _node(node: XmlNode, flags: int, indent: int) -> str:
    indenting = not flags & PRINT_NO_INDENTING
    tabs = "\t" * indent if indenting else ""
    kind = node.type
    if kind is NodeType.DOCUMENT:
        text = "".join(_node(child, flags, indent) for child in node._children)
    elif kind is NodeType.ELEMENT:
        text = _element(node, flags, indent, tabs)
    elif kind is NodeType.DATA:
        text = tabs + _expand(node.value)
    elif kind is NodeType.CDATA:
        text = f"{tabs}<![CDATA[{node.value}]]>"
    elif kind is NodeType.DECLARATION:
        text = f"{tabs}<?xml{_attributes(node)}?>"
    elif kind is NodeType.COMMENT:
        text = f"{tabs}<!--{node.value}-->"
    elif kind is NodeType.DOCTYPE:
        text = f"{tabs}<!DOCTYPE {node.value}>"
    elif kind is NodeType.PI:
        text = f"{tabs}<?{node.name} {node.value}?>"
    else:
        raise ValueError(f"unknown node type: {kind!r}")
    return text + "\n" if indenting else text


def print_xml(node: XmlNode, flags: int = 0) -> str:
    """Render ``node`` and everything below it as XML text."""
    return _node(node, flags, 0)
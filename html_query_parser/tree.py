"""Read-only view over a parsed lxml HTML tree.

lxml owns every node; parent and child links are maintained by libxml2,
so this module only classifies nodes and renders them back to markup.
"""
from enum import Enum
from typing import Iterator, List, Optional
from xml.sax.saxutils import escape

from lxml import etree, html

RAW_TEXT_TAGS = frozenset({"script", "style"})


class NodeKind(Enum):
    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    OTHER = "other"


def node_kind(node) -> NodeKind:
    """Classify an lxml node (or document) into a :class:`NodeKind`."""
    if isinstance(node, etree._ElementTree):
        return NodeKind.DOCUMENT
    if isinstance(node, str):
        # lxml hands text back as strings, never as nodes
        return NodeKind.TEXT
    if isinstance(node, etree._Comment):
        return NodeKind.COMMENT
    if isinstance(node, etree._Element) and isinstance(node.tag, str):
        return NodeKind.ELEMENT
    return NodeKind.OTHER


def element_children(node) -> List[etree._Element]:
    """Element children of *node*, skipping comments and processing instructions."""
    return [child for child in node if node_kind(child) is NodeKind.ELEMENT]


def element_ancestors(node) -> Iterator[etree._Element]:
    for ancestor in node.iterancestors():
        if node_kind(ancestor) is NodeKind.ELEMENT:
            yield ancestor


def is_descendant(node, ancestor) -> bool:
    """True when *node* sits strictly below *ancestor*."""
    if isinstance(ancestor, etree._ElementTree):
        return node.getroottree().getroot() is ancestor.getroot()
    return any(parent is ancestor for parent in node.iterancestors())


def outer_html(node) -> str:
    return html.tostring(node, encoding="unicode", method="html", with_tail=False)


def inner_html(node) -> str:
    parts = []
    if node.text:
        if node.tag in RAW_TEXT_TAGS:
            parts.append(node.text)
        else:
            parts.append(escape(node.text))
    for child in node:
        parts.append(html.tostring(child, encoding="unicode", method="html", with_tail=True))
    return "".join(parts)


def text_content(node) -> str:
    return str(node.text_content())


class Document:
    """The parsed form of one markup string.

    ``tree`` is ``None`` when the input carried no content at all; such a
    document answers every query with no match.
    """

    def __init__(self, tree: Optional[etree._ElementTree] = None):
        self.tree = tree

    @property
    def is_empty(self) -> bool:
        return self.tree is None

    @property
    def root(self) -> Optional[etree._Element]:
        """The ``<html>`` element, or ``None`` for an empty document."""
        if self.tree is None:
            return None
        return self.tree.getroot()

    @property
    def scope_root(self) -> Optional[etree._ElementTree]:
        """Where whole-document queries start from."""
        return self.tree

    @property
    def doctype(self) -> str:
        if self.tree is None:
            return ""
        return self.tree.docinfo.doctype

    def iter_elements(self) -> Iterator[etree._Element]:
        """All elements in document order."""
        if self.tree is None:
            return iter(())
        return (node for node in self.tree.iter() if node_kind(node) is NodeKind.ELEMENT)

    def __repr__(self) -> str:
        if self.tree is None:
            return "<Document (empty)>"
        return f"<Document root={self.root.tag!r}>"

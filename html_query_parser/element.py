from typing import Dict, List, Optional

from lxml import etree

from .dispatcher import QueryDispatcher
from .query import QueryConfig
from . import tree


class HTMLElement:
    """A read-only handle on one element of a parsed document.

    Handles are cheap views: they hold the lxml node and the dispatcher of
    the document it came from. Queries issued on a handle only search the
    element's descendants.
    """

    __slots__ = ("_node", "_dispatcher")

    def __init__(self, node: etree._Element, dispatcher: QueryDispatcher):
        self._node = node
        self._dispatcher = dispatcher

    @classmethod
    def wrap(cls, node: Optional[etree._Element], dispatcher: QueryDispatcher) -> Optional["HTMLElement"]:
        if node is None:
            return None
        return cls(node, dispatcher)

    @property
    def node(self) -> etree._Element:
        return self._node

    @property
    def outer_html(self) -> str:
        return tree.outer_html(self._node)

    @property
    def inner_html(self) -> str:
        return tree.inner_html(self._node)

    @property
    def text(self) -> str:
        """Text of every descendant text node, in document order."""
        return tree.text_content(self._node)

    @property
    def id(self) -> Optional[str]:
        return self._node.get("id")

    @property
    def tag_name(self) -> str:
        return self._node.tag.upper()

    @property
    def class_name(self) -> str:
        return self._node.get("class", "")

    @property
    def class_list(self) -> List[str]:
        return self.class_name.split()

    @property
    def attributes(self) -> Dict[str, str]:
        return dict(self._node.attrib)

    def get_attribute(self, name: str) -> Optional[str]:
        return self._node.get(name)

    @property
    def children(self) -> List["HTMLElement"]:
        return [HTMLElement(child, self._dispatcher) for child in tree.element_children(self._node)]

    @property
    def first_child(self) -> Optional["HTMLElement"]:
        children = tree.element_children(self._node)
        return HTMLElement(children[0], self._dispatcher) if children else None

    @property
    def last_child(self) -> Optional["HTMLElement"]:
        children = tree.element_children(self._node)
        return HTMLElement(children[-1], self._dispatcher) if children else None

    @property
    def parent(self) -> Optional["HTMLElement"]:
        return HTMLElement.wrap(next(tree.element_ancestors(self._node), None), self._dispatcher)

    def select_first(self, query: QueryConfig) -> Optional["HTMLElement"]:
        """Return the first descendant matching *query*, or None."""
        return HTMLElement.wrap(self._dispatcher.query_first(query, self._node), self._dispatcher)

    def select_many(self, query: QueryConfig, limit: Optional[int] = None) -> List["HTMLElement"]:
        """Return descendants matching *query* in document order.

        A limit of None or 0 returns every match.
        """
        nodes = self._dispatcher.query_many(query, self._node, limit)
        return [HTMLElement(node, self._dispatcher) for node in nodes]

    def __eq__(self, other):
        if not isinstance(other, HTMLElement):
            return NotImplemented
        return self._node is other._node

    def __hash__(self):
        return hash(self._node)

    def __str__(self):
        return self.outer_html

    def __repr__(self):
        node_id = self.id
        if node_id is not None:
            return f"<HTMLElement {self.tag_name} id={node_id!r}>"
        return f"<HTMLElement {self.tag_name}>"

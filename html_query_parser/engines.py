"""CSS and XPath matching over an lxml tree.

Both engines compile a query once, cache the compiled form, and evaluate it
against a scope: either the whole document (an ``ElementTree``) or a single
element. Element scopes only ever yield strict descendants of that element.
"""
from collections import OrderedDict
from itertools import islice
from typing import Hashable, List, Optional, Tuple, Union
import logging

from lxml import etree
import cssselect

from .exceptions import QueryCompileError, QueryEvaluationError
from .tree import NodeKind, is_descendant, node_kind
from .utils import anchor_xpath, normalize_selector, scope_xpath

logger = logging.getLogger(__name__)

Scope = Union[etree._ElementTree, etree._Element]
Compiled = Tuple[str, etree.XPath]

DEFAULT_CACHE_SIZE = 256


class CompiledQueryCache:
    """Least-recently-used store of compiled queries, capped at *maxsize* entries."""

    def __init__(self, maxsize: int = DEFAULT_CACHE_SIZE):
        self.maxsize = max(maxsize, 1)
        self._entries: "OrderedDict[Hashable, Compiled]" = OrderedDict()

    def get(self, key: Hashable) -> Optional[Compiled]:
        compiled = self._entries.get(key)
        if compiled is not None:
            self._entries.move_to_end(key)
        return compiled

    def put(self, key: Hashable, compiled: Compiled) -> Compiled:
        self._entries[key] = compiled
        self._entries.move_to_end(key)
        while len(self._entries) > self.maxsize:
            self._entries.popitem(last=False)
        return compiled

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def _take(nodes, limit: Optional[int]) -> List[etree._Element]:
    # zero and negative limits mean "no limit"
    if limit is not None and limit > 0:
        return list(islice(nodes, limit))
    return list(nodes)


def _run(compiled: etree.XPath, scope: Scope, query: str) -> list:
    try:
        return compiled(scope)
    except etree.XPathError as e:
        raise QueryEvaluationError(f"Error evaluating {query!r}: {str(e)}")


class CssEngine:
    """Translate CSS selectors to XPath with cssselect and run them with lxml."""

    # lxml evaluates whole-document queries from the root element, which must stay matchable
    DOCUMENT_PREFIX = "descendant-or-self::"
    ELEMENT_PREFIX = "descendant::"

    def __init__(self, cache_size: int = DEFAULT_CACHE_SIZE):
        self.translator = cssselect.HTMLTranslator()
        self._compiled = CompiledQueryCache(cache_size)
        logger.debug("CSS engine initialized")

    def translate(self, selector: str, scoped: bool = False) -> str:
        """Return the XPath text a selector compiles to."""
        if not selector or not selector.strip():
            raise QueryCompileError("Empty CSS selector")
        try:
            prefix = self.ELEMENT_PREFIX if scoped else self.DOCUMENT_PREFIX
            return self.translator.css_to_xpath(selector, prefix=prefix)
        except cssselect.SelectorError as e:
            raise QueryCompileError(f"Invalid CSS selector {selector!r}: {str(e)}")

    def compile(self, selector: str, scoped: bool = False) -> Compiled:
        key = (normalize_selector(selector), scoped)
        cached = self._compiled.get(key)
        if cached is not None:
            return cached

        expression = self.translate(selector, scoped)
        try:
            compiled = etree.XPath(expression, smart_strings=False)
        except etree.XPathError as e:
            raise QueryCompileError(f"Selector {selector!r} translated to bad XPath: {str(e)}")

        return self._compiled.put(key, (selector, compiled))

    def evaluate(self, compiled: Compiled, scope: Scope,
                 limit: Optional[int] = None) -> List[etree._Element]:
        selector, xpath = compiled
        results = _run(xpath, scope, selector)
        return _take((node for node in results if node_kind(node) is NodeKind.ELEMENT), limit)

    def select(self, selector: str, scope: Scope, limit: Optional[int] = None) -> List[etree._Element]:
        scoped = not isinstance(scope, etree._ElementTree)
        return self.evaluate(self.compile(selector, scoped), scope, limit)


class XPathEngine:
    """Run XPath 1.0 expressions with lxml.

    Expressions evaluated against an element are rewritten with
    :func:`scope_xpath` first, so ``//li`` means "li elements below this
    element" rather than "anywhere in the document". Whole-document queries
    go through :func:`anchor_xpath`, because lxml runs them from the root
    element and ``html/body`` has to start at the document node.
    """

    def __init__(self, cache_size: int = DEFAULT_CACHE_SIZE):
        self._compiled = CompiledQueryCache(cache_size)
        logger.debug("XPath engine initialized")

    def compile(self, expression: str, scoped: bool = False) -> Compiled:
        key = (expression, scoped)
        cached = self._compiled.get(key)
        if cached is not None:
            return cached

        if not expression or not expression.strip():
            raise QueryCompileError("Empty XPath expression")

        text = scope_xpath(expression) if scoped else anchor_xpath(expression)
        try:
            compiled = etree.XPath(text, smart_strings=False)
        except etree.XPathError as e:
            raise QueryCompileError(f"Invalid XPath expression {expression!r}: {str(e)}")

        return self._compiled.put(key, (expression, compiled))

    def evaluate(self, compiled: Compiled, scope: Scope,
                 limit: Optional[int] = None) -> List[etree._Element]:
        expression, xpath = compiled
        results = _run(xpath, scope, expression)
        if not isinstance(results, list):
            # numbers, booleans and strings never name nodes
            return []

        nodes = (node for node in results if node_kind(node) is NodeKind.ELEMENT)
        if not isinstance(scope, etree._ElementTree):
            nodes = (node for node in nodes if is_descendant(node, scope))
        return _take(nodes, limit)

    def select(self, expression: str, scope: Scope, limit: Optional[int] = None) -> List[etree._Element]:
        scoped = not isinstance(scope, etree._ElementTree)
        return self.evaluate(self.compile(expression, scoped), scope, limit)

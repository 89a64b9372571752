# html_query_parser/__init__.py
from .parser import HTMLParser, parse
from .element import HTMLElement
from .query import QueryType, QueryConfig, css, xpath
from .config import ParseOptions
from .tree import Document, NodeKind
from .parsing import parse_markup
from .dispatcher import QueryDispatcher
from .engines import CssEngine, XPathEngine, CompiledQueryCache
from .validators import QueryValidator, QueryInfo
from .exceptions import (
    HTMLQueryError,
    ParseError,
    QueryError,
    QueryCompileError,
    QueryEvaluationError,
    ValidationError,
    InvalidQueryError
)
from .utils import (
    normalize_selector,
    get_selector_specificity,
    scope_xpath,
    anchor_xpath
)

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "HTMLParser",
    "HTMLElement",
    "parse",
    "css",
    "xpath",
    "QueryType",
    "QueryConfig",
    "ParseOptions",

    # Internals exposed for advanced use
    "Document",
    "NodeKind",
    "parse_markup",
    "QueryDispatcher",
    "CssEngine",
    "XPathEngine",
    "CompiledQueryCache",
    "QueryValidator",
    "QueryInfo",

    # Exceptions
    "HTMLQueryError",
    "ParseError",
    "QueryError",
    "QueryCompileError",
    "QueryEvaluationError",
    "ValidationError",
    "InvalidQueryError",

    # Utility functions
    "normalize_selector",
    "get_selector_specificity",
    "scope_xpath",
    "anchor_xpath"
]

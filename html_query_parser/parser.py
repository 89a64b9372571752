from typing import List, Optional, Union
import logging

from .config import ParseOptions
from .dispatcher import QueryDispatcher
from .element import HTMLElement
from .parsing import parse_markup
from .query import QueryConfig

logger = logging.getLogger(__name__)


class HTMLParser:
    """Parse an HTML document once and query it with CSS or XPath."""

    def __init__(self, content: Union[str, bytes], options: Optional[ParseOptions] = None):
        self.content = content
        self.options = options or ParseOptions()
        self.document = parse_markup(content, self.options)
        self.dispatcher = QueryDispatcher(self.document)
        logger.debug(f"Parsed document: {self.document!r}")

    @property
    def root(self) -> Optional[HTMLElement]:
        """Handle on the ``<html>`` element, or None for an empty document."""
        return HTMLElement.wrap(self.document.root, self.dispatcher)

    def select_first(self, query: QueryConfig) -> Optional[HTMLElement]:
        """
        Find the first element matching a query anywhere in the document.

        Args:
            query: Query built with css() or xpath()

        Returns:
            HTMLElement for the first match, or None. Invalid queries
            return None instead of raising.
        """
        return HTMLElement.wrap(self.dispatcher.query_first(query), self.dispatcher)

    def select_many(self, query: QueryConfig, limit: Optional[int] = None) -> List[HTMLElement]:
        """
        Find every element matching a query, in document order.

        Args:
            query: Query built with css() or xpath()
            limit: Maximum number of elements; None or 0 means no limit

        Returns:
            List of HTMLElement, empty when nothing matches or the
            query is invalid.
        """
        nodes = self.dispatcher.query_many(query, limit=limit)
        return [HTMLElement(node, self.dispatcher) for node in nodes]

    def __repr__(self):
        return f"<HTMLParser {self.document!r}>"


def parse(content: Union[str, bytes], options: Optional[ParseOptions] = None) -> HTMLParser:
    """Shortcut for ``HTMLParser(content, options)``."""
    return HTMLParser(content, options)

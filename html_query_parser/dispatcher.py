from typing import Dict, List, Optional, Union
import logging
import threading

from lxml import etree

from .engines import CssEngine, XPathEngine
from .exceptions import QueryError
from .query import QueryConfig, QueryType
from .tree import Document

logger = logging.getLogger(__name__)

ENGINE_FACTORIES = {
    QueryType.CSS: CssEngine,
    QueryType.XPATH: XPathEngine,
}


class QueryDispatcher:
    """Route queries to the engine for their type, building engines on first use.

    One dispatcher belongs to one document; engines and their compiled
    query caches live and die with it.
    """

    def __init__(self, document: Document):
        self.document = document
        self._engines: Dict[QueryType, Union[CssEngine, XPathEngine]] = {}
        self._lock = threading.Lock()

    @property
    def initialized_engines(self) -> List[QueryType]:
        return sorted(self._engines)

    def resolve_engine(self, kind: QueryType) -> Union[CssEngine, XPathEngine]:
        engine = self._engines.get(kind)
        if engine is not None:
            return engine

        with self._lock:
            if kind not in self._engines:
                logger.debug(f"Initializing {QueryType(kind).name} engine")
                self._engines[kind] = ENGINE_FACTORIES[QueryType(kind)]()
            return self._engines[kind]

    def query_many(
        self,
        config: QueryConfig,
        scope: Optional[etree._Element] = None,
        limit: Optional[int] = None
    ) -> List[etree._Element]:
        """
        Run a query and return matching elements in document order.

        Args:
            config: Query built with css() or xpath()
            scope: Element to search below; None searches the whole document
            limit: Maximum number of matches; None or 0 returns all of them

        Returns:
            List of lxml elements. Invalid queries give an empty list.
        """
        if scope is None:
            scope = self.document.scope_root
        if scope is None:
            return []

        engine = self.resolve_engine(config.type)
        try:
            return engine.select(config.query, scope, limit)
        except QueryError as e:
            logger.debug(f"Query failed, returning no matches: {str(e)}")
            return []

    def query_first(
        self,
        config: QueryConfig,
        scope: Optional[etree._Element] = None
    ) -> Optional[etree._Element]:
        matches = self.query_many(config, scope, limit=1)
        return matches[0] if matches else None

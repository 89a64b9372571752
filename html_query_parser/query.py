from enum import IntEnum

from pydantic import BaseModel, ConfigDict


class QueryType(IntEnum):
    CSS = 0
    XPATH = 1


class QueryConfig(BaseModel):
    """A query string paired with the engine that understands it.

    Build these with :func:`css` or :func:`xpath` rather than by hand.
    """

    model_config = ConfigDict(frozen=True)

    query: str
    type: QueryType


def css(query: str) -> QueryConfig:
    """Wrap a CSS selector for ``select_first`` / ``select_many``."""
    return QueryConfig(query=query, type=QueryType.CSS)


def xpath(query: str) -> QueryConfig:
    """Wrap an XPath expression for ``select_first`` / ``select_many``."""
    return QueryConfig(query=query, type=QueryType.XPATH)

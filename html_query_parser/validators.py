from typing import Any, Dict, Mapping, Optional, Tuple
from dataclasses import dataclass

from .engines import CssEngine, XPathEngine
from .exceptions import InvalidQueryError, QueryCompileError
from .query import QueryConfig, QueryType
from .utils import get_selector_specificity, normalize_selector


@dataclass
class QueryInfo:
    raw_query: str
    query_type: QueryType
    processed_query: str
    compiled: str
    is_valid: bool
    validation_message: str = ""
    specificity: Tuple[int, int, int] = (0, 0, 0)


class QueryValidator:
    """Report whether queries compile, since the select methods hide failures."""

    def __init__(self, css_engine: Optional[CssEngine] = None, xpath_engine: Optional[XPathEngine] = None):
        self.css_engine = css_engine or CssEngine()
        self.xpath_engine = xpath_engine or XPathEngine()

    def validate(self, config: QueryConfig) -> QueryInfo:
        """Compile a query and describe the outcome without raising."""
        if config.type == QueryType.CSS:
            return self._validate_css(config.query)
        return self._validate_xpath(config.query)

    def check(self, config: QueryConfig) -> QueryInfo:
        """Like validate(), but raise InvalidQueryError for a bad query."""
        info = self.validate(config)
        if not info.is_valid:
            raise InvalidQueryError(info.validation_message)
        return info

    def process_queries(self, queries: Mapping[str, QueryConfig]) -> Dict[str, Any]:
        """Validate a dictionary of named queries."""
        result = {
            "processed_queries": {},
            "all_valid": True
        }

        for field, config in queries.items():
            info = self.validate(config)
            result["processed_queries"][field] = {
                "type": info.query_type.name.lower(),
                "processed": info.processed_query,
                "is_valid": info.is_valid,
                "message": info.validation_message,
                "specificity": info.specificity
            }
            if not info.is_valid:
                result["all_valid"] = False

        return result

    def _validate_css(self, selector: str) -> QueryInfo:
        processed = normalize_selector(selector)
        try:
            compiled = self.css_engine.translate(selector)
        except QueryCompileError as e:
            return QueryInfo(
                raw_query=selector,
                query_type=QueryType.CSS,
                processed_query=processed,
                compiled="",
                is_valid=False,
                validation_message=str(e)
            )

        return QueryInfo(
            raw_query=selector,
            query_type=QueryType.CSS,
            processed_query=processed,
            compiled=compiled,
            is_valid=True,
            specificity=get_selector_specificity(selector)
        )

    def _validate_xpath(self, expression: str) -> QueryInfo:
        processed = expression.strip()
        try:
            self.xpath_engine.compile(expression)
        except QueryCompileError as e:
            return QueryInfo(
                raw_query=expression,
                query_type=QueryType.XPATH,
                processed_query=processed,
                compiled="",
                is_valid=False,
                validation_message=str(e)
            )

        return QueryInfo(
            raw_query=expression,
            query_type=QueryType.XPATH,
            processed_query=processed,
            compiled=expression,
            is_valid=True
        )

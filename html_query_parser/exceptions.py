class HTMLQueryError(Exception):
    """Base error for the package."""
    pass

class ParseError(HTMLQueryError):
    """Error parsing markup."""
    pass

class QueryError(HTMLQueryError):
    """Base error for a CSS or XPath query."""
    pass

class QueryCompileError(QueryError):
    """The query string could not be compiled."""
    pass

class QueryEvaluationError(QueryError):
    """A compiled query failed while running against the tree."""
    pass

class ValidationError(HTMLQueryError):
    """Base validation error."""
    pass

class InvalidQueryError(ValidationError):
    """Invalid query error."""
    pass

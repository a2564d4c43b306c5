class GhQueryError(Exception):
    """Base class for every error raised by gh-query."""


class QueryValidationError(GhQueryError):
    """Search parameters were rejected before any request was made."""


class InvalidInput(QueryValidationError):
    pass


class UnknownScope(QueryValidationError):
    def __init__(self, value: str):
        super().__init__(f"unknown scope '{value}'")
        self.value = value


class UnknownLanguage(QueryValidationError):
    def __init__(self, value: str):
        super().__init__(f"unknown language '{value}'")
        self.value = value


class UnknownOrder(QueryValidationError):
    def __init__(self, value: str):
        super().__init__(f"unknown order '{value}'")
        self.value = value


class UnknownSort(QueryValidationError):
    def __init__(self, value: str):
        super().__init__(f"unknown sort order '{value}'")
        self.value = value


class SearchError(GhQueryError):
    """The search request or its response failed."""


class TransportError(SearchError):
    def __init__(self, cause: Exception):
        super().__init__(f"GitHub request error: {type(cause).__name__} {cause!r}")
        self.cause = cause


class UpstreamError(SearchError):
    def __init__(self, status: int, query: str):
        super().__init__(f"search for query '{query}' failed with status: {status}")
        self.status = status
        self.query = query


class DecodeError(SearchError):
    def __init__(self, cause: Exception):
        super().__init__(f"failed to decode search response: {cause}")
        self.cause = cause

"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class PageElementNotFound(ServiceError):
    """Raised when a selector does not resolve to an element on the page."""


class SearchError(ServiceError):
    """Base class for anything that prevents a search response from rendering."""


class SearchRequestError(SearchError):
    """Transport failure, timeout or non-2xx status from the search endpoint."""


class MalformedResponseError(SearchError):
    """Response body is not JSON or does not match the expected shape."""

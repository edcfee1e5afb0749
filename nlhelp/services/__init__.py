from nlhelp.services.exceptions import (
    MalformedResponseError,
    PageElementNotFound,
    SearchError,
    SearchRequestError,
    ServiceError,
)
from nlhelp.services.search import SearchClient

__all__ = [
    "MalformedResponseError",
    "PageElementNotFound",
    "SearchClient",
    "SearchError",
    "SearchRequestError",
    "ServiceError",
]

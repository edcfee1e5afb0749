from nlhelp.domain.models import EntriesResponse, Query, SearchEntry, SearchResponse, TextResponse

__all__ = ["EntriesResponse", "Query", "SearchEntry", "SearchResponse", "TextResponse"]

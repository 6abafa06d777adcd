"""NIP-50 search: query extensions, query builder and search filters."""

from .extensions import (
    EXTENSION_HANDLERS,
    SearchExtensions,
    Sentiment,
    parse_search_query,
)
from .filters import (
    DEFAULT_ARTICLE_LIMIT,
    DEFAULT_SEARCH_LIMIT,
    build_filter_description,
    search,
    search_articles,
    search_filter,
    search_text_notes,
)
from .query import SearchQuery

__all__ = [
    # Extensions
    "EXTENSION_HANDLERS",
    "SearchExtensions",
    "Sentiment",
    "parse_search_query",
    # Query builder
    "SearchQuery",
    # Filters
    "DEFAULT_ARTICLE_LIMIT",
    "DEFAULT_SEARCH_LIMIT",
    "build_filter_description",
    "search",
    "search_articles",
    "search_filter",
    "search_text_notes",
]

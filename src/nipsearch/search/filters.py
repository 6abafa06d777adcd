"""Search filter construction (NIP-50).

The builders copy their arguments into a fresh ``Filter`` without
validating or parsing them. ``search`` is always the raw query string;
callers that want extensions stripped or inspected run
``parse_search_query`` themselves first.
"""

from typing import List, Optional, Sequence

from ..schema.filter import Filter, PublicKey, Timestamp
from ..schema.kinds import EventKind


DEFAULT_SEARCH_LIMIT = 100
DEFAULT_ARTICLE_LIMIT = 50


def _as_list(values: Optional[Sequence]) -> Optional[List]:
    # Copy so later changes to the caller's sequence don't reach the filter
    if isinstance(values, (list, tuple)):
        return list(values)
    return values


def search_filter(
    query: str,
    kinds: Optional[Sequence[int]] = None,
    authors: Optional[Sequence[PublicKey]] = None,
    since: Optional[Timestamp] = None,
    until: Optional[Timestamp] = None,
    limit: Optional[int] = DEFAULT_SEARCH_LIMIT
) -> Filter:
    """Create a filter for a full-text search.

    Args:
        query: Search string, stored verbatim in ``search``
        kinds: Event kinds to restrict the search to
        authors: Author public keys to restrict the search to
        since: Minimum creation time (datetime or Unix seconds)
        until: Maximum creation time (datetime or Unix seconds)
        limit: Maximum number of results; pass None to leave it unset

    Returns:
        New Filter. Arguments passed as None are absent from it.
    """
    # model_construct skips validation so building never fails; bad values
    # surface when the filter is encoded.
    return Filter.model_construct(
        authors=_as_list(authors),
        kinds=_as_list(kinds),
        since=since,
        until=until,
        limit=limit,
        search=query,
    )


def search(
    query: str,
    kinds: Optional[Sequence[int]] = None,
    authors: Optional[Sequence[PublicKey]] = None,
    limit: Optional[int] = DEFAULT_SEARCH_LIMIT
) -> Filter:
    """Create a search filter without a time range."""
    return search_filter(query, kinds=kinds, authors=authors, limit=limit)


def search_text_notes(
    query: str,
    authors: Optional[Sequence[PublicKey]] = None,
    limit: Optional[int] = DEFAULT_SEARCH_LIMIT
) -> Filter:
    """Create a search filter for text notes (kind 1)."""
    return search(query, kinds=[EventKind.TEXT_NOTE.value], authors=authors, limit=limit)


def search_articles(
    query: str,
    authors: Optional[Sequence[PublicKey]] = None,
    limit: Optional[int] = DEFAULT_ARTICLE_LIMIT
) -> Filter:
    """Create a search filter for long-form articles (kind 30023)."""
    return search(query, kinds=[EventKind.LONG_FORM_CONTENT.value], authors=authors, limit=limit)


def build_filter_description(filter_obj: Optional[Filter]) -> str:
    """Generate a human-readable description of a filter.

    Args:
        filter_obj: Filter to describe

    Returns:
        One-line description, e.g. ``search="nostr" AND kinds in [1] AND limit=100``
    """
    if filter_obj is None:
        return "No filter"

    descriptions = []

    if filter_obj.search is not None:
        descriptions.append(f'search="{filter_obj.search}"')
    if filter_obj.ids:
        descriptions.append(f"ids in [{','.join(filter_obj.ids)}]")
    if filter_obj.kinds:
        descriptions.append(f"kinds in [{','.join(str(k) for k in filter_obj.kinds)}]")
    if filter_obj.authors:
        descriptions.append(f"{len(filter_obj.authors)} author(s)")
    if filter_obj.since is not None:
        descriptions.append(f"since {filter_obj.since}")
    if filter_obj.until is not None:
        descriptions.append(f"until {filter_obj.until}")
    if filter_obj.e:
        descriptions.append(f"#e in [{','.join(filter_obj.e)}]")
    if filter_obj.p:
        descriptions.append(f"#p in [{','.join(filter_obj.p)}]")
    if filter_obj.limit is not None:
        descriptions.append(f"limit={filter_obj.limit}")

    return " AND ".join(descriptions) if descriptions else "Empty filter"

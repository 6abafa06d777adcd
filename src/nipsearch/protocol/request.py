"""REQ message encoding for search subscriptions.

Wire format (NIP-01)::

    ["REQ","<subscription_id>",<filter>,...]

Encoding is best-effort: a filter that cannot be serialized is sent as
``{}`` instead of failing the caller, so these functions always return a
well-formed message.
"""

import logging
from typing import Optional, Sequence
from uuid import uuid4

from ..schema.filter import Filter, PublicKey
from ..search.filters import DEFAULT_SEARCH_LIMIT, search_filter

logger = logging.getLogger(__name__)

REQ = "REQ"
EMPTY_FILTER_JSON = "{}"


def encode_filter(filter_obj: Filter) -> str:
    """Return the canonical JSON of a filter, or ``{}`` if encoding fails."""
    try:
        return filter_obj.to_json()
    except Exception as e:
        logger.warning(f"Filter encoding failed, sending empty filter: {e}")
        return EMPTY_FILTER_JSON


def create_request(subscription_id: str, filter_obj: Filter, *filters: Filter) -> str:
    """Render a REQ message carrying one or more filters.

    The subscription id is placed between plain quotes without escaping;
    callers must pass ids free of quotes and backslashes.

    Args:
        subscription_id: Subscription identifier
        filter_obj: First filter
        *filters: Additional filters, OR-ed together by the relay

    Returns:
        REQ message string
    """
    parts = [f'"{REQ}"', f'"{subscription_id}"']
    parts.extend(encode_filter(f) for f in (filter_obj, *filters))
    return "[" + ",".join(parts) + "]"


def create_search_request(
    subscription_id: str,
    query: str,
    kinds: Optional[Sequence[int]] = None,
    authors: Optional[Sequence[PublicKey]] = None,
    limit: Optional[int] = DEFAULT_SEARCH_LIMIT
) -> str:
    """Create a REQ message for a NIP-50 search.

    Args:
        subscription_id: Subscription identifier (inserted unescaped)
        query: Search string, sent verbatim as the filter's ``search``
        kinds: Event kinds to restrict the search to
        authors: Author public keys to restrict the search to
        limit: Maximum number of results; None leaves it out

    Returns:
        ``["REQ","<id>",{...}]`` with sorted filter keys, or
        ``["REQ","<id>",{}]`` if the filter could not be encoded

    Example:
        >>> create_search_request("sub1", "hello")
        '["REQ","sub1",{"limit":100,"search":"hello"}]'
    """
    filter_obj = search_filter(query, kinds=kinds, authors=authors, limit=limit)
    return create_request(subscription_id, filter_obj)


def new_subscription_id(prefix: str = "search") -> str:
    """Generate a quote-safe subscription id like ``search-1a2b3c4d``."""
    return f"{prefix}-{uuid4().hex[:8]}"

"""Client-to-relay message encoding."""

from nipsearch.protocol.request import (
    EMPTY_FILTER_JSON,
    create_request,
    create_search_request,
    encode_filter,
    new_subscription_id,
)

__all__ = [
    "EMPTY_FILTER_JSON",
    "create_request",
    "create_search_request",
    "encode_filter",
    "new_subscription_id",
]

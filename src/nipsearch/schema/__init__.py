"""Wire-level data types shared by the search and protocol modules."""

from nipsearch.schema.filter import EventID, Filter, PublicKey, Timestamp
from nipsearch.schema.kinds import EventKind

__all__ = [
    "EventID",
    "EventKind",
    "Filter",
    "PublicKey",
    "Timestamp",
]

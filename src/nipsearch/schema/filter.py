"""Subscription filter schema (NIP-01 with the NIP-50 ``search`` field).

A filter is the JSON object a client places in a ``REQ`` message to tell a
relay which events it wants. Only the fields used by search are modelled
here, plus the ``#e`` / ``#p`` tag queries so that filters built elsewhere
survive a round trip.
"""

import json
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from ..errors import FilterEncodingError


# 64-character hex strings on the wire; no validation is done here.
EventID = str
PublicKey = str

# Either a datetime or Unix seconds. Always serialized as Unix seconds.
Timestamp = Union[datetime, int]


class Filter(BaseModel):
    """Relay query filter.

    Every field is optional and ``None`` means "absent": absent fields are
    left out of the wire encoding entirely rather than sent as ``null``.

    Shared fields:
        - ids: Event IDs to match
        - authors: Author public keys to match
        - kinds: Event kinds to match
        - since: Minimum creation time (inclusive)
        - until: Maximum creation time (inclusive)
        - limit: Maximum number of events the relay should return
        - search: Full-text query (NIP-50)

    Tag queries (wire keys ``#e`` and ``#p``):
        - e: Referenced event IDs
        - p: Referenced public keys
    """

    model_config = ConfigDict(populate_by_name=True)

    ids: Optional[List[EventID]] = None
    authors: Optional[List[PublicKey]] = None
    kinds: Optional[List[int]] = None
    since: Optional[Timestamp] = None
    until: Optional[Timestamp] = None
    limit: Optional[int] = None
    e: Optional[List[str]] = Field(default=None, alias="#e")
    p: Optional[List[str]] = Field(default=None, alias="#p")
    search: Optional[str] = None

    @field_serializer('since', 'until')
    def serialize_timestamp(self, value: Optional[Timestamp]) -> Optional[int]:
        if isinstance(value, datetime):
            return int(value.timestamp())
        return value

    def to_wire_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready dict using wire keys, absent fields omitted.

        Raises:
            FilterEncodingError: If a field value has no JSON representation
        """
        try:
            return self.model_dump(mode='json', by_alias=True, exclude_none=True)
        except (TypeError, ValueError) as e:  # PydanticSerializationError is a ValueError
            raise FilterEncodingError(f"Cannot serialize filter: {e}") from e

    def to_json(self) -> str:
        """Return the canonical encoding of this filter.

        Keys are sorted and separators are compact, so two filters with the
        same content always produce byte-identical output. Non-ASCII text is
        kept as UTF-8.

        Raises:
            FilterEncodingError: If the filter cannot be serialized
        """
        data = self.to_wire_dict()
        try:
            return json.dumps(data, sort_keys=True, separators=(',', ':'), ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise FilterEncodingError(f"Cannot encode filter as JSON: {e}") from e

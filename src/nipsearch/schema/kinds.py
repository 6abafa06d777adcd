"""Standard event kinds (NIP-01 and the NIPs that search helpers target)."""

from enum import IntEnum


class EventKind(IntEnum):
    """Event kinds determine how a client interprets event content."""

    SET_METADATA = 0
    TEXT_NOTE = 1
    RECOMMEND_SERVER = 2
    FOLLOW_LIST = 3
    ENCRYPTED_DIRECT_MESSAGE = 4  # NIP-04, deprecated in favor of NIP-17
    DELETION = 5
    REACTION = 7
    WEBSITE_REACTION = 17
    OPEN_TIMESTAMPS = 1040
    LONG_FORM_CONTENT = 30023

    @property
    def description(self) -> str:
        """Human-readable name of the kind."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    EventKind.SET_METADATA: "Set Metadata",
    EventKind.TEXT_NOTE: "Text Note",
    EventKind.RECOMMEND_SERVER: "Recommend Server",
    EventKind.FOLLOW_LIST: "Follow List",
    EventKind.ENCRYPTED_DIRECT_MESSAGE: "Encrypted Direct Message",
    EventKind.DELETION: "Event Deletion",
    EventKind.REACTION: "Reaction",
    EventKind.WEBSITE_REACTION: "Website Reaction",
    EventKind.OPEN_TIMESTAMPS: "OpenTimestamps Attestation",
    EventKind.LONG_FORM_CONTENT: "Long-form Content",
}

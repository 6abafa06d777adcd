"""nipsearch: NIP-50 search queries and subscription requests for Nostr relays."""

__version__ = "0.1.0"

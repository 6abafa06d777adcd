"""NIP-50 search extension parser.

Relays that support NIP-50 accept ``key:value`` tokens inside the
``search`` string to narrow a query, e.g.::

    bitcoin conference language:en sentiment:positive include:spam

Supported extensions:
    - include:spam (include results a relay would normally filter as spam)
    - domain:<domain> (results from users with a NIP-05 domain)
    - language:<code> (ISO language code)
    - sentiment:negative|neutral|positive
    - nsfw:true|false

The query is split on single spaces only. There is no quoting or escaping,
so every token is classified on its own.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


class Sentiment(str, Enum):
    """Sentiment values recognized by the ``sentiment:`` extension."""

    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    POSITIVE = "positive"


_SENTIMENTS = {member.value: member for member in Sentiment}


@dataclass
class SearchExtensions:
    """Extensions detected in a search query.

    ``None`` means the extension was not present. ``nsfw`` is tri-state:
    ``None`` (no ``nsfw:`` token), ``True`` or ``False``.
    """

    include_spam: bool = False
    domain: Optional[str] = None
    language: Optional[str] = None
    sentiment: Optional[Sentiment] = None
    nsfw: Optional[bool] = None

    def is_default(self) -> bool:
        """Return True if no extension changed any field."""
        return self == SearchExtensions()

    def to_dict(self) -> Dict[str, Any]:
        """Return present extensions as a plain dict (sentiment as its literal)."""
        data: Dict[str, Any] = {"include_spam": self.include_spam}
        if self.domain is not None:
            data["domain"] = self.domain
        if self.language is not None:
            data["language"] = self.language
        if self.sentiment is not None:
            data["sentiment"] = self.sentiment.value
        if self.nsfw is not None:
            data["nsfw"] = self.nsfw
        return data


def _apply_include(extensions: SearchExtensions, value: str):
    # Only include:spam has an effect; other include: values are dropped
    if value == "spam":
        extensions.include_spam = True


def _apply_domain(extensions: SearchExtensions, value: str):
    extensions.domain = value


def _apply_language(extensions: SearchExtensions, value: str):
    extensions.language = value


def _apply_sentiment(extensions: SearchExtensions, value: str):
    extensions.sentiment = _SENTIMENTS.get(value)


def _apply_nsfw(extensions: SearchExtensions, value: str):
    extensions.nsfw = value == "true"


ExtensionHandler = Callable[[SearchExtensions, str], None]

# Checked in order; the first matching prefix claims the token.
EXTENSION_HANDLERS: List[Tuple[str, ExtensionHandler]] = [
    ("include:", _apply_include),
    ("domain:", _apply_domain),
    ("language:", _apply_language),
    ("sentiment:", _apply_sentiment),
    ("nsfw:", _apply_nsfw),
]


def _match_extension(term: str) -> Tuple[Optional[ExtensionHandler], str]:
    """Return the handler claiming ``term`` and the value after its prefix."""
    for prefix, handler in EXTENSION_HANDLERS:
        if term.startswith(prefix):
            return handler, term[len(prefix):]
    return None, term


def parse_search_query(query: str) -> Tuple[str, SearchExtensions]:
    """Split a search query into its base query and NIP-50 extensions.

    Tokens that start with a known extension prefix are consumed, even when
    their value is not recognized. All other tokens are base terms and are
    rejoined with single spaces in their original order. When the same
    extension appears more than once, the last token wins.

    Args:
        query: Raw search string, possibly empty

    Returns:
        Tuple of (base_query, extensions)

    Example:
        >>> base, ext = parse_search_query("domain:example.com bitcoin talk")
        >>> base
        'bitcoin talk'
        >>> ext.domain
        'example.com'
    """
    extensions = SearchExtensions()
    base_terms: List[str] = []

    for term in query.split(" "):
        if not term:
            continue

        handler, value = _match_extension(term)
        if handler is None:
            base_terms.append(term)
            continue

        handler(extensions, value)
        logger.debug(f"Consumed search extension token: {term}")

    return " ".join(base_terms), extensions

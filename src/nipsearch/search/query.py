"""Builder for search strings carrying NIP-50 extensions."""

from typing import List, Union

from .extensions import Sentiment


class SearchQuery:
    """Compose a search string from terms and extension tokens.

    Components are emitted in the order they were added, joined by single
    spaces. Each method returns the builder so calls can be chained.

    Example:
        >>> SearchQuery().add("bitcoin").language("en").nsfw(False).build()
        'bitcoin language:en nsfw:false'
    """

    def __init__(self):
        self._components: List[str] = []

    def add(self, term: str) -> "SearchQuery":
        """Add a plain search term (may contain spaces)."""
        self._components.append(term)
        return self

    def include_spam(self) -> "SearchQuery":
        """Include results a relay would normally filter as spam."""
        self._components.append("include:spam")
        return self

    def domain(self, domain: str) -> "SearchQuery":
        """Restrict results to users with a NIP-05 identifier on ``domain``."""
        self._components.append(f"domain:{domain}")
        return self

    def language(self, code: str) -> "SearchQuery":
        """Restrict results to a language code."""
        self._components.append(f"language:{code}")
        return self

    def sentiment(self, sentiment: Union[Sentiment, str]) -> "SearchQuery":
        """Restrict results by sentiment.

        Raises:
            ValueError: If ``sentiment`` is not a recognized value
        """
        value = Sentiment(sentiment)
        self._components.append(f"sentiment:{value.value}")
        return self

    def nsfw(self, include: bool) -> "SearchQuery":
        """Include or exclude NSFW content."""
        self._components.append(f"nsfw:{'true' if include else 'false'}")
        return self

    def build(self) -> str:
        """Return the final search string."""
        return " ".join(self._components)

    def __str__(self) -> str:
        return self.build()

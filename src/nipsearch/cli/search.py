"""CLI commands for NIP-50 search queries, filters and REQ messages."""

import json
import logging
from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..config import SearchDefaults, load_user_config
from ..protocol import create_search_request, encode_filter, new_subscription_id
from ..search import (
    DEFAULT_ARTICLE_LIMIT,
    SearchQuery,
    build_filter_description,
    parse_search_query,
    search_articles,
    search_filter,
    search_text_notes,
)
from .core.command_wrapper import with_error_handling
from .errors import InvalidArgumentError
from .logging_config import setup_logging
from .output import print_json

console = Console()
logger = logging.getLogger(__name__)

PRESET_TEXT_NOTES = "text-notes"
PRESET_ARTICLES = "articles"


def _load_defaults() -> SearchDefaults:
    try:
        return load_user_config().search
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid config file: {e}")


def _resolve_limit(limit: Optional[int], no_limit: bool, fallback: Optional[int]) -> Optional[int]:
    if no_limit:
        if limit is not None:
            raise InvalidArgumentError("--limit and --no-limit cannot be used together")
        return None
    return limit if limit is not None else fallback


@with_error_handling("search", "parse", log_params=["query"])
def parse_command(query: str, output_json: bool = False, verbose: bool = False, debug: bool = False):
    """Show how a search string splits into base query and extensions.

    Args:
        query: Raw search string
        output_json: If True, output JSON format
        verbose: If True, show informational logging
        debug: If True, show per-token parser decisions
    """
    setup_logging(verbose, debug)

    base_query, extensions = parse_search_query(query)

    if output_json:
        print_json(
            "success",
            "Parsed search query",
            data={
                "query": query,
                "base_query": base_query,
                "extensions": extensions.to_dict(),
            },
        )
        return

    table = Table(title="Search query")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("base query", Text(base_query) if base_query else Text("(empty)", style="dim"))
    for field, value in extensions.to_dict().items():
        table.add_row(field, Text(str(value)))

    console.print(table)


@with_error_handling("search", "filter", log_params=["query", "kinds"])
def filter_command(
    query: str,
    kinds: Sequence[int] = (),
    authors: Sequence[str] = (),
    since: Optional[int] = None,
    until: Optional[int] = None,
    limit: Optional[int] = None,
    no_limit: bool = False,
    preset: Optional[str] = None,
    output_json: bool = False,
    verbose: bool = False,
    debug: bool = False
):
    """Build a search filter and print its canonical JSON.

    Args:
        query: Search string (sent verbatim)
        kinds: Event kinds; falls back to the configured kinds
        authors: Author public keys
        since: Minimum creation time (Unix seconds)
        until: Maximum creation time (Unix seconds)
        limit: Result limit; falls back to the configured limit
        no_limit: Leave the limit out of the filter
        preset: "text-notes" or "articles" to fix the kinds
        output_json: If True, output JSON format
        verbose: If True, show the filter description
        debug: If True, show debug logging
    """
    setup_logging(verbose, debug)

    if preset and kinds:
        raise InvalidArgumentError("--text-notes/--articles cannot be combined with --kind")
    if preset and (since is not None or until is not None):
        raise InvalidArgumentError("--text-notes/--articles do not support --since/--until")

    defaults = _load_defaults()
    author_list = list(authors) or None

    if preset == PRESET_TEXT_NOTES:
        filter_obj = search_text_notes(
            query, authors=author_list, limit=_resolve_limit(limit, no_limit, defaults.limit)
        )
    elif preset == PRESET_ARTICLES:
        filter_obj = search_articles(
            query, authors=author_list, limit=_resolve_limit(limit, no_limit, DEFAULT_ARTICLE_LIMIT)
        )
    else:
        filter_obj = search_filter(
            query,
            kinds=list(kinds) or defaults.kinds,
            authors=author_list,
            since=since,
            until=until,
            limit=_resolve_limit(limit, no_limit, defaults.limit),
        )

    logger.info(f"Filter: {build_filter_description(filter_obj)}")
    encoded = encode_filter(filter_obj)

    if output_json:
        print_json("success", "Built search filter", data={"filter": json.loads(encoded)})
    else:
        print(encoded)


@with_error_handling("search", "req", log_params=["query", "subscription_id"])
def req_command(
    query: str,
    subscription_id: Optional[str] = None,
    kinds: Sequence[int] = (),
    authors: Sequence[str] = (),
    limit: Optional[int] = None,
    no_limit: bool = False,
    output_json: bool = False,
    verbose: bool = False,
    debug: bool = False
):
    """Print the REQ message for a search subscription.

    Args:
        query: Search string (sent verbatim)
        subscription_id: Subscription id; generated when omitted
        kinds: Event kinds; falls back to the configured kinds
        authors: Author public keys
        limit: Result limit; falls back to the configured limit
        no_limit: Leave the limit out of the filter
        output_json: If True, output JSON format
        verbose: If True, show the subscription id in use
        debug: If True, show debug logging
    """
    setup_logging(verbose, debug)

    # The encoder inserts the id between plain quotes without escaping
    if subscription_id is not None and ('"' in subscription_id or '\\' in subscription_id):
        raise InvalidArgumentError("Subscription id must not contain quotes or backslashes")

    defaults = _load_defaults()
    sub_id = subscription_id or new_subscription_id(defaults.subscription_prefix)
    logger.info(f"Subscription id: {sub_id}")

    message = create_search_request(
        sub_id,
        query,
        kinds=list(kinds) or defaults.kinds,
        authors=list(authors) or None,
        limit=_resolve_limit(limit, no_limit, defaults.limit),
    )

    if output_json:
        print_json(
            "success",
            "Built search request",
            data={"subscription_id": sub_id, "message": message},
        )
    else:
        # print() not console.print(): the message must not be re-wrapped
        print(message)


@with_error_handling("search", "build", log_params=["terms"])
def build_command(
    terms: Sequence[str],
    include_spam: bool = False,
    domain: Optional[str] = None,
    language: Optional[str] = None,
    sentiment: Optional[str] = None,
    nsfw: Optional[bool] = None,
    output_json: bool = False
):
    """Compose a search string from terms and extension options."""
    query = SearchQuery()
    for term in terms:
        query.add(term)
    if include_spam:
        query.include_spam()
    if domain is not None:
        query.domain(domain)
    if language is not None:
        query.language(language)
    if sentiment is not None:
        try:
            query.sentiment(sentiment)
        except ValueError:
            raise InvalidArgumentError(f"Unknown sentiment: {sentiment}")
    if nsfw is not None:
        query.nsfw(nsfw)

    built = query.build()
    if output_json:
        print_json("success", "Built search query", data={"query": built})
    else:
        print(built)

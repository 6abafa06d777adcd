"""Main CLI entry point for nipsearch."""

import sys

import click

from nipsearch import __version__
from nipsearch.cli.errors import (
    EXIT_SUCCESS,
    EXIT_ERROR,
    EXIT_INVALID_ARGS,
    EXIT_NOT_FOUND,
    CliError,
    InvalidArgumentError,
    ResourceNotFoundError,
)

MIN_PYTHON = (3, 12)
if sys.version_info < MIN_PYTHON:
    print(f"[ERROR] Python {MIN_PYTHON[0]}.{MIN_PYTHON[1]}+ required")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli():
    """nipsearch: NIP-50 search queries and REQ messages for Nostr relays"""
    pass


@cli.command('parse')
@click.argument('query')
@click.option('--json', 'output_json', is_flag=True, help='Output JSON format')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.option('--debug', is_flag=True, help='Debug mode (show parser decisions)')
def parse(query, output_json, verbose, debug):
    """Split a query into base terms and extensions"""
    from nipsearch.cli.search import parse_command
    parse_command(query, output_json=output_json, verbose=verbose, debug=debug)


@cli.command('filter')
@click.argument('query')
@click.option('--kind', 'kinds', type=int, multiple=True, help='Event kind (repeatable)')
@click.option('--author', 'authors', multiple=True, help='Author public key, hex (repeatable)')
@click.option('--since', type=int, help='Minimum creation time (Unix seconds)')
@click.option('--until', type=int, help='Maximum creation time (Unix seconds)')
@click.option('--limit', type=int, help='Maximum number of results (default: from config, 100)')
@click.option('--no-limit', is_flag=True, help='Leave the limit out of the filter')
@click.option('--text-notes', 'preset', flag_value='text-notes', help='Search text notes (kind 1)')
@click.option('--articles', 'preset', flag_value='articles', help='Search long-form articles (kind 30023, limit 50)')
@click.option('--json', 'output_json', is_flag=True, help='Output JSON format')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.option('--debug', is_flag=True, help='Debug mode')
def filter_(query, kinds, authors, since, until, limit, no_limit, preset, output_json, verbose, debug):
    """Build a search filter"""
    from nipsearch.cli.search import filter_command
    filter_command(
        query,
        kinds=kinds,
        authors=authors,
        since=since,
        until=until,
        limit=limit,
        no_limit=no_limit,
        preset=preset,
        output_json=output_json,
        verbose=verbose,
        debug=debug,
    )


@cli.command('req')
@click.argument('query')
@click.option('--id', 'subscription_id', help='Subscription id (default: generated)')
@click.option('--kind', 'kinds', type=int, multiple=True, help='Event kind (repeatable)')
@click.option('--author', 'authors', multiple=True, help='Author public key, hex (repeatable)')
@click.option('--limit', type=int, help='Maximum number of results (default: from config, 100)')
@click.option('--no-limit', is_flag=True, help='Leave the limit out of the filter')
@click.option('--json', 'output_json', is_flag=True, help='Output JSON format')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.option('--debug', is_flag=True, help='Debug mode')
def req(query, subscription_id, kinds, authors, limit, no_limit, output_json, verbose, debug):
    """Build a REQ message for a search subscription"""
    from nipsearch.cli.search import req_command
    req_command(
        query,
        subscription_id=subscription_id,
        kinds=kinds,
        authors=authors,
        limit=limit,
        no_limit=no_limit,
        output_json=output_json,
        verbose=verbose,
        debug=debug,
    )


@cli.command('build')
@click.argument('terms', nargs=-1, required=True)
@click.option('--include-spam', is_flag=True, help='Include spam results')
@click.option('--domain', help='Restrict to a NIP-05 domain')
@click.option('--language', help='Restrict to a language code')
@click.option('--sentiment', type=click.Choice(['negative', 'neutral', 'positive']), help='Restrict by sentiment')
@click.option('--nsfw/--no-nsfw', default=None, help='Include or exclude NSFW content')
@click.option('--json', 'output_json', is_flag=True, help='Output JSON format')
def build(terms, include_spam, domain, language, sentiment, nsfw, output_json):
    """Compose a query string with extensions"""
    from nipsearch.cli.search import build_command
    build_command(
        terms,
        include_spam=include_spam,
        domain=domain,
        language=language,
        sentiment=sentiment,
        nsfw=nsfw,
        output_json=output_json,
    )


from nipsearch.cli.config import config_group  # noqa: E402
cli.add_command(config_group, name='config')


def main():
    """Main CLI entry point with structured error handling."""
    try:
        cli()
        return EXIT_SUCCESS
    except click.ClickException as e:
        e.show()
        return EXIT_INVALID_ARGS
    except (InvalidArgumentError, click.BadParameter) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_INVALID_ARGS
    except ResourceNotFoundError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except KeyboardInterrupt:
        print("\n[INFO] Operation cancelled by user", file=sys.stderr)
        return EXIT_ERROR
    except CliError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return e.exit_code
    except Exception as e:
        print(f"[ERROR] Unexpected error: {e}", file=sys.stderr)
        if '--verbose' in sys.argv or '-v' in sys.argv:
            import traceback
            traceback.print_exc()
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())

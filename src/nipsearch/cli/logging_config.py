"""Centralized logging configuration for CLI commands.

Provides three logging levels:
- Default: Clean output, only warnings and errors
- Verbose: Show what nipsearch is doing (filters, consumed extensions)
- Debug: Show everything including per-token parser decisions
"""

import logging
import warnings


def setup_logging_default():
    """Default logging: Clean output, only warnings and errors.

    Suppresses:
    - nipsearch INFO/DEBUG records
    - Pydantic serializer warnings for filters that fall back to ``{}``
      (the fallback itself is still logged as a warning)
    """
    logging.basicConfig(
        level=logging.WARNING,
        format='%(levelname)s: %(message)s'
    )
    logging.getLogger('nipsearch').setLevel(logging.WARNING)

    warnings.filterwarnings('ignore', message='.*Pydantic serializer warnings.*')


def setup_logging_verbose():
    """Verbose logging: Show user-relevant progress.

    Shows:
    - Filter descriptions and generated subscription ids
    - Configuration file in use
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(message)s'
    )
    logging.getLogger('nipsearch').setLevel(logging.INFO)

    warnings.filterwarnings('ignore', message='.*Pydantic serializer warnings.*')


def setup_logging_debug():
    """Debug logging: Show everything.

    Shows:
    - All user messages
    - Parser decisions for each extension token
    - Pydantic serializer warnings
    """
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(name)s - %(levelname)s: %(message)s'
    )
    logging.getLogger('nipsearch').setLevel(logging.DEBUG)


def setup_logging(verbose: bool = False, debug: bool = False):
    """Pick the logging preset matching the command's flags."""
    if debug:
        setup_logging_debug()
    elif verbose:
        setup_logging_verbose()
    else:
        setup_logging_default()

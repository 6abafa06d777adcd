"""Command wrapper utilities for consistent error handling and logging.

This module provides decorators and context managers for CLI command functions
that standardize:
- Interaction logging
- Error handling with proper exit codes
- Custom exception handling (InvalidArgumentError, ResourceNotFoundError)

Example:
    @with_error_handling("search", "req", log_params=["query"])
    def req_command(query: str, output_json: bool):
        print(create_search_request(new_subscription_id(), query))
"""

import functools
import inspect
import sys
from contextlib import contextmanager
from typing import Callable, Optional

from ..errors import InvalidArgumentError, ResourceNotFoundError
from ..interaction_logger import interaction_logger
from ..output import print_error


@contextmanager
def command_context(
    namespace: str,
    operation: str,
    output_json: bool = False,
    error_prefix: str = "Failed",
    **log_kwargs
):
    """Context manager for CLI command error handling and logging.

    Args:
        namespace: Logging namespace (e.g., "search", "config")
        operation: Operation name (e.g., "parse", "req", "init")
        output_json: Whether JSON output mode is enabled
        error_prefix: Prefix for error messages (default: "Failed")
        **log_kwargs: Additional keyword arguments passed to interaction_logger.start()

    Raises:
        InvalidArgumentError: Re-raised for CLI to handle
        ResourceNotFoundError: Re-raised for CLI to handle
        SystemExit: On unhandled exceptions (exits with code 1)
    """
    interaction_logger.start(namespace, operation, **log_kwargs)

    try:
        yield
        interaction_logger.finish()

    except (InvalidArgumentError, ResourceNotFoundError):
        interaction_logger.finish(error="invalid argument or resource not found")
        raise  # Re-raise for CLI main() to handle

    except Exception as e:
        interaction_logger.finish(error=str(e))
        print_error(f"{error_prefix}: {e}", output_json)
        sys.exit(1)


def with_error_handling(
    namespace: str,
    operation: str,
    error_prefix: str = "Failed",
    log_params: Optional[list] = None,
):
    """Decorator for CLI command functions with consistent error handling.

    The decorated function should accept ``output_json`` as a keyword
    argument when it supports JSON output.

    Args:
        namespace: Logging namespace (e.g., "search", "config")
        operation: Operation name (e.g., "parse", "req")
        error_prefix: Prefix for error messages (default: "Failed")
        log_params: Parameter names whose values are passed to the
                    interaction logger. If None, only namespace and
                    operation are logged.

    Returns:
        Decorator function
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            output_json = kwargs.get('output_json', False)

            log_kwargs = {}
            if log_params:
                param_names = list(inspect.signature(func).parameters.keys())

                for param_name in log_params:
                    if param_name in kwargs:
                        log_kwargs[param_name] = kwargs[param_name]
                    elif param_name in param_names:
                        idx = param_names.index(param_name)
                        if idx < len(args):
                            log_kwargs[param_name] = args[idx]

            with command_context(
                namespace,
                operation,
                output_json=output_json,
                error_prefix=error_prefix,
                **log_kwargs
            ):
                return func(*args, **kwargs)

        return wrapper
    return decorator

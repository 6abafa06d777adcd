"""Custom exception classes for CLI error handling.

Each exception class maps to a specific process exit code.

Exit Codes:
- 0: Success
- 1: General error
- 2: Invalid arguments
- 3: Resource not found
"""

import click


EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_INVALID_ARGS = 2
EXIT_NOT_FOUND = 3


class CliError(Exception):
    """Base exception for nipsearch CLI errors.

    Default exit code is EXIT_ERROR (1).
    """
    exit_code = EXIT_ERROR


class InvalidArgumentError(CliError):
    """Invalid command line arguments or configuration.

    Examples:
    - Mutually exclusive options used together
    - Config file exists and --force was not given
    - Config file contents fail validation

    Exit code: 2
    """
    exit_code = EXIT_INVALID_ARGS


class ResourceNotFoundError(CliError):
    """Resource not found (config file, etc.).

    Exit code: 3
    """
    exit_code = EXIT_NOT_FOUND


class ConfigNotFoundError(ResourceNotFoundError):
    """Specific case: configuration file not found."""
    pass


class HelpfulGroup(click.Group):
    """Click group that lists valid subcommands when given an unknown one."""

    def __init__(self, *args, usage_examples: list[str] | None = None, **kwargs):
        """Initialize with optional usage examples.

        Args:
            usage_examples: List of example commands to show in error messages
        """
        super().__init__(*args, **kwargs)
        self.usage_examples = usage_examples or []

    def resolve_command(self, ctx, args):
        """Override to provide helpful error when subcommand is invalid."""
        if not args:
            return super().resolve_command(ctx, args)

        cmd_name = args[0]
        if self.get_command(ctx, cmd_name) is not None:
            return super().resolve_command(ctx, args)

        valid_commands = list(self.commands.keys())
        group_name = ctx.info_name or self.name

        error_lines = [
            f"[ERROR] '{cmd_name}' is not a valid subcommand for '{group_name}'.",
            "",
            f"Available subcommands: {', '.join(valid_commands)}",
            "",
            "Correct syntax:",
        ]

        if self.usage_examples:
            for example in self.usage_examples:
                error_lines.append(f"  {example}")
        else:
            for cmd in valid_commands:
                error_lines.append(f"  nipsearch {group_name} {cmd} --help")

        error_lines.append("")
        error_lines.append(f"Run 'nipsearch {group_name} --help' for more information.")

        raise click.UsageError("\n".join(error_lines))

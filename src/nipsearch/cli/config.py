"""Configuration file commands."""

from pathlib import Path
from typing import Optional

import click
import yaml

from nipsearch.cli.core.command_wrapper import with_error_handling
from nipsearch.cli.errors import ConfigNotFoundError, HelpfulGroup, InvalidArgumentError
from nipsearch.cli.output import print_info, print_json, print_success
from nipsearch.config import NipSearchConfig, load_config, save_config
from nipsearch.paths import get_config_path


def _target_path(path: Optional[str]) -> Path:
    return Path(path) if path else get_config_path()


@with_error_handling("config", "show")
def show_config(path: Optional[str] = None, output_json: bool = False):
    """Print the effective configuration."""
    config_path = _target_path(path)

    if config_path.exists():
        try:
            config = load_config(config_path)
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid config file {config_path}: {e}")
        source = str(config_path)
    elif path:
        raise ConfigNotFoundError(f"Config file not found: {config_path}")
    else:
        config = NipSearchConfig()
        source = "defaults"

    data = config.model_dump(mode='json')
    if output_json:
        print_json("success", f"Configuration from {source}", data=data)
        return

    print_info(f"Configuration from {source}")
    print(yaml.dump(data, default_flow_style=False).rstrip())


@with_error_handling("config", "init", log_params=["path"])
def init_config(path: Optional[str] = None, force: bool = False, output_json: bool = False):
    """Write a default configuration file."""
    config_path = _target_path(path)

    if config_path.exists() and not force:
        raise InvalidArgumentError(f"Config file already exists: {config_path} (use --force to overwrite)")

    save_config(NipSearchConfig(), config_path)
    print_success(f"Wrote default config to {config_path}", output_json, data={"path": str(config_path)})


@click.group(
    name='config',
    cls=HelpfulGroup,
    usage_examples=[
        "nipsearch config path",
        "nipsearch config show --json",
        "nipsearch config init --force",
    ],
)
def config_group():
    """Configuration file management"""
    pass


@config_group.command('path')
def config_path_command():
    """Show the default config file location"""
    print(get_config_path())


@config_group.command('show')
@click.option('--path', 'path', type=click.Path(dir_okay=False), help='Config file (default: XDG config dir)')
@click.option('--json', 'output_json', is_flag=True, help='Output JSON format')
def config_show_command(path, output_json):
    """Show the effective configuration"""
    show_config(path=path, output_json=output_json)


@config_group.command('init')
@click.option('--path', 'path', type=click.Path(dir_okay=False), help='Config file (default: XDG config dir)')
@click.option('--force', is_flag=True, help='Overwrite an existing config file')
@click.option('--json', 'output_json', is_flag=True, help='Output JSON format')
def config_init_command(path, force, output_json):
    """Create a config file with default values"""
    init_config(path=path, force=force, output_json=output_json)

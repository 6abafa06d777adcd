"""Configuration management for nipsearch."""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field

from nipsearch.paths import get_config_path
from nipsearch.search.filters import DEFAULT_SEARCH_LIMIT


class SearchDefaults(BaseModel):
    """Defaults applied by CLI commands when an option is omitted."""
    limit: Optional[int] = DEFAULT_SEARCH_LIMIT
    kinds: Optional[List[int]] = None
    subscription_prefix: str = "search"


class NipSearchConfig(BaseModel):
    """Root configuration."""
    search: SearchDefaults = Field(default_factory=SearchDefaults)


def load_config(config_path: Path) -> NipSearchConfig:
    """Load and validate configuration file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated NipSearchConfig instance (defaults for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is invalid
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    return NipSearchConfig(**data)


def save_config(config: NipSearchConfig, config_path: Path):
    """Save configuration to file.

    Args:
        config: Configuration to save
        config_path: Path to save YAML file
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, 'w') as f:
        yaml.dump(config.model_dump(mode='json'), f, default_flow_style=False)


def load_user_config(config_path: Optional[Path] = None) -> NipSearchConfig:
    """Load the user's config file, or defaults if it doesn't exist."""
    path = config_path or get_config_path()
    if not path.exists():
        return NipSearchConfig()
    return load_config(path)

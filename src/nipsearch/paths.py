"""nipsearch directory and path management.

XDG Base Directory Specification compliant:
- Config (user-edited): ~/.config/nipsearch/
- State (logs): ~/.local/state/nipsearch/
"""

import os
from pathlib import Path


CONFIG_FILENAME = "config.yaml"


def get_config_dir() -> Path:
    """Get the configuration directory (XDG-compliant: ~/.config/nipsearch).

    The directory is not created here; ``save_config`` creates it on write.

    Returns:
        Path to ~/.config/nipsearch directory (may not exist)
    """
    config_home = os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))
    return Path(config_home) / "nipsearch"


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return get_config_dir() / CONFIG_FILENAME


def get_log_dir() -> Path:
    """Get the log directory (XDG-compliant: ~/.local/state/nipsearch/logs).

    Logs are state: not essential, but worth keeping across runs.

    Creates the directory if it doesn't exist.

    Returns:
        Path to ~/.local/state/nipsearch/logs directory
    """
    state_home = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(state_home) / "nipsearch" / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir

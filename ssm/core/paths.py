import os
from pathlib import Path

CONFIG_DIR_ENV = "SSM_CONFIG_DIR"
CONNECTIONS_FILE = "connections.json"
DEFAULTS_FILE = "defaults.json"


def default_config_dir():
    """
    Returns the per-user configuration directory.

    ``$SSM_CONFIG_DIR`` wins when set, otherwise ``~/.config/ssm``.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "ssm"


def connections_path(config_dir):
    return Path(config_dir) / CONNECTIONS_FILE


def defaults_path(config_dir):
    return Path(config_dir) / DEFAULTS_FILE

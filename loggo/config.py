"""Configuration loading for Loggo.

Settings live in ``~/.config/loggo/config.toml``; set ``LOGGO_CONFIG_DIR``
to use another directory.
"""

import copy
import logging
import os
from pathlib import Path

import toml

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "LOGGO_CONFIG_DIR"
CONFIG_FILE_NAME = "config.toml"
WORKSPACE_FILE_NAME = "workspace.json"

CHOOSERS = ("prompt", "tk")

DEFAULT_CONFIG = {
    "storage": {
        "log_dir": "~/Loggo",
        "workspace": "",  # Empty means <config dir>/workspace.json
    },
    "display": {
        "currency": "$",
        "chart_width": 40,
    },
    "dialogs": {
        "chooser": "prompt",  # prompt or tk
    },
}


def get_config_dir() -> Path:
    """Directory holding the config and workspace files."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "loggo"


def get_config_path() -> Path:
    return get_config_dir() / CONFIG_FILE_NAME


def _merge(defaults: dict, overrides: dict) -> dict:
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config() -> dict:
    """Load configuration merged over the defaults.
    
    Returns:
        Config dict. Defaults are used when the file is missing or
        cannot be parsed.
    """
    config_path = get_config_path()
    
    if not config_path.exists():
        return copy.deepcopy(DEFAULT_CONFIG)
    
    try:
        user_config = toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return copy.deepcopy(DEFAULT_CONFIG)
    
    return _merge(DEFAULT_CONFIG, user_config)


def create_template_config(force: bool = False) -> Path:
    """Write a template configuration file.
    
    Args:
        force: Overwrite an existing file.
        
    Returns:
        Path of the config file.
        
    Raises:
        FileExistsError: If the file exists and ``force`` is False.
    """
    config_path = get_config_path()
    
    if config_path.exists() and not force:
        raise FileExistsError(f"Config already exists: {config_path}")
    
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        toml.dump(DEFAULT_CONFIG, f)
    
    return config_path


def get_log_dir(config: dict) -> Path:
    """Default directory offered when saving or opening logs."""
    log_dir = config.get("storage", {}).get("log_dir") or DEFAULT_CONFIG["storage"]["log_dir"]
    return Path(log_dir).expanduser()


def get_workspace_path(config: dict) -> Path:
    workspace = config.get("storage", {}).get("workspace")
    if workspace:
        return Path(workspace).expanduser()
    return get_config_dir() / WORKSPACE_FILE_NAME


def get_currency(config: dict) -> str:
    return str(config.get("display", {}).get("currency", "$"))


def get_chart_width(config: dict) -> int:
    """Chart width in characters, at least 10."""
    try:
        width = int(config.get("display", {}).get("chart_width", 40))
    except (TypeError, ValueError):
        width = 40
    return max(width, 10)


def get_chooser_kind(config: dict) -> str:
    kind = str(config.get("dialogs", {}).get("chooser", "prompt")).lower()
    if kind not in CHOOSERS:
        logger.warning("Unknown chooser %r, using prompt", kind)
        return "prompt"
    return kind

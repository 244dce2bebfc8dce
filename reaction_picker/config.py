# reaction_picker/config.py
# Description: Configuration management for the reaction picker.
#
# Imports
import copy
import os
import sys
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union
#
# Third-Party Imports
import toml
from loguru import logger
#
#######################################################################################################################
#
# Constants:

CONFIG_ENV_VAR = "REACTION_PICKER_CONFIG"

# --- Path to the user's configuration file ---
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "reaction_picker" / "config.toml"

# --- Data directory for the frequency database and logs ---
BASE_DATA_DIR = Path.home() / ".local" / "share" / "reaction_picker"

CONFIG_TOML_CONTENT = """
# Configuration for the reaction picker
# This file is created on first run. Values here override the built-in defaults.

[logging]
level = "INFO"
log_filename = "reaction_picker.log"
console_output = false
rotation = "10 MB"
retention = "7 days"

[database]
# Where selection counts are persisted. Use ":memory:" for a throwaway store.
frequency_db_path = "~/.local/share/reaction_picker/frequently_used_emojis.db"

[picker]
# Maximum number of entries in the "Frequently Used" tab. 0 means no limit.
frequent_limit = 0
# Shown under an empty search bar after the frequently used emoji.
default_emojis = ["clap", "+1", "heart_eyes", "grinning", "thinking_face", "smiley"]

[server]
# Base URL custom emoji assets are served from.
base_url = ""

# Site-defined custom emoji, one table per emoji. The table name must match `name`.
# [custom_emojis.partyparrot]
# name = "partyparrot"
# extension = "gif"
"""

try:
    DEFAULT_CONFIG_FROM_TOML: Dict[str, Any] = tomllib.loads(CONFIG_TOML_CONTENT)
except tomllib.TOMLDecodeError as e:
    logger.critical(f"Could not parse built-in CONFIG_TOML_CONTENT: {e}")
    DEFAULT_CONFIG_FROM_TOML = {}

#
# Functions:

def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merges update into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def get_config_path() -> Path:
    """The user config file: $REACTION_PICKER_CONFIG if set, else the default location."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH


# --- Primary Configuration Loading Logic ---
_CONFIG_CACHE: Optional[Dict[str, Any]] = None
_CONFIG_PATH: Optional[Path] = None


def load_config(force_reload: bool = False, config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Loads the picker configuration.

    The built-in defaults are the base. If the user file doesn't exist it is
    created from CONFIG_TOML_CONTENT; otherwise its values are merged on top.
    A file that cannot be parsed is logged and ignored.

    Args:
        force_reload: Ignore the cached configuration.
        config_path: Explicit config file, overriding the environment and default.
    """
    global _CONFIG_CACHE, _CONFIG_PATH
    path = Path(config_path).expanduser() if config_path is not None else get_config_path()
    if _CONFIG_CACHE is not None and not force_reload and path == _CONFIG_PATH:
        return _CONFIG_CACHE

    loaded_config = copy.deepcopy(DEFAULT_CONFIG_FROM_TOML)

    if not path.exists():
        logger.info(f"Config file not found at {path}. Creating it with default values.")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(CONFIG_TOML_CONTENT)
            logger.info(f"Created default config file at {path}")
        except OSError as e:
            logger.error(f"Could not create default config file {path}: {e}. Using internal defaults.")
    else:
        logger.info(f"Loading config from: {path}")
        try:
            with open(path, "rb") as f:
                user_config_from_file = tomllib.load(f)
            loaded_config = deep_merge_dicts(loaded_config, user_config_from_file)
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Error decoding TOML config file {path}: {e}. Using internal defaults.")
        except OSError as e:
            logger.error(f"Could not read config file {path}: {e}. Using internal defaults.")

    _CONFIG_CACHE = loaded_config
    _CONFIG_PATH = path
    logger.debug(f"load_config returning config with top-level keys: {list(loaded_config.keys())}")
    return _CONFIG_CACHE


def get_setting(section: str, key: str, default: Any = None) -> Any:
    """Helper to get a specific setting from the loaded configuration."""
    config = load_config(config_path=_CONFIG_PATH)
    section_data = config.get(section)
    if isinstance(section_data, dict):
        return section_data.get(key, default)
    return default


def save_setting(section: str, key: str, value: Any) -> bool:
    """
    Saves one setting to the user's TOML configuration file.

    Nested sections are addressed with dots (e.g. "custom_emojis.partyparrot").
    The config cache is reloaded afterwards.

    Returns:
        True if the setting was saved, False otherwise.
    """
    path = _CONFIG_PATH or get_config_path()
    logger.info(f"Saving setting: [{section}].{key} = {value!r}")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create config directory {path.parent}: {e}")
        return False

    config_data: Dict[str, Any] = {}
    if path.exists():
        try:
            with open(path, "rb") as f:
                config_data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Corrupted config file at {path}. Cannot save. Please fix or delete it. Error: {e}")
            return False
        except OSError as e:
            logger.error(f"Unexpected error reading {path}: {e}")
            return False

    current_level = config_data
    try:
        for part in section.split('.'):
            current_level = current_level.setdefault(part, {})
        current_level[key] = value
    except (TypeError, AttributeError):
        logger.error(
            f"Configuration structure conflict. Could not set '{key}' in section '{section}' "
            f"because a part of the path is not a table."
        )
        return False

    try:
        with open(path, "w", encoding="utf-8") as f:
            toml.dump(config_data, f)
    except OSError as e:
        logger.error(f"Failed to write updated config to {path}: {e}")
        return False

    logger.success(f"Saved setting to {path}")
    load_config(force_reload=True, config_path=path)
    return True


# --- Database and Log File Path Getters ---

def _config_value(config: Optional[Dict[str, Any]], section: str, key: str, default: Any) -> Any:
    if config is None:
        return get_setting(section, key, default)
    section_data = config.get(section, {})
    if not isinstance(section_data, dict):
        return default
    return section_data.get(key, default)


def get_frequency_db_path(config: Optional[Dict[str, Any]] = None) -> Union[Path, str]:
    """
    Path of the frequency database, or ':memory:'.

    Reads `config` when given, the cached configuration otherwise.
    """
    default_db_path_str = DEFAULT_CONFIG_FROM_TOML.get("database", {}).get(
        "frequency_db_path", str(BASE_DATA_DIR / "frequently_used_emojis.db")
    )
    db_path_str = _config_value(config, "database", "frequency_db_path", default_db_path_str)
    if db_path_str == ":memory:":
        return db_path_str
    return Path(db_path_str).expanduser().resolve()


def get_log_file_path(config: Optional[Dict[str, Any]] = None) -> Path:
    """Log file next to the frequency database (or in the data dir for a memory store)."""
    db_path = get_frequency_db_path(config)
    log_dir = BASE_DATA_DIR if isinstance(db_path, str) else db_path.parent
    default_log_filename = DEFAULT_CONFIG_FROM_TOML.get("logging", {}).get("log_filename", "reaction_picker.log")
    log_file_path = log_dir / _config_value(config, "logging", "log_filename", default_log_filename)
    try:
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create log directory {log_file_path.parent}: {e}")
    return log_file_path


def get_custom_emoji_definitions(config: Optional[Dict[str, Any]] = None) -> Dict[str, Dict[str, Any]]:
    """
    The `[custom_emojis]` tables as a name -> {name, extension} mapping.

    Reads the cached configuration when none is given. Definitions are
    passed through unvalidated; the catalog drops malformed ones.
    """
    if config is None:
        config = load_config(config_path=_CONFIG_PATH)
    definitions = config.get("custom_emojis", {})
    if not isinstance(definitions, dict):
        logger.warning("Ignoring [custom_emojis]: expected a table of tables")
        return {}
    return dict(definitions)

#
# End of config.py
#######################################################################################################################

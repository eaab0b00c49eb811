"""
Settings loader for config/settings.yaml.
"""

import os
import yaml
from pathlib import Path

HOME_ENV = "DESSERT_CLICKER_HOME"

def find_base_dir(checkout: Path = None) -> Path:
    """
    Directory holding config/ and logs/.

    $DESSERT_CLICKER_HOME when set, otherwise the source checkout if it
    carries a settings file, otherwise the working directory. An installed
    copy therefore never reads or writes inside site-packages.
    """
    home = os.environ.get(HOME_ENV)
    if home:
        return Path(home)
    if checkout is None:
        checkout = Path(__file__).resolve().parents[1]
    if (checkout / "config" / "settings.yaml").exists():
        return checkout
    return Path.cwd()

BASE_DIR = find_base_dir()
CONFIG_PATH = BASE_DIR / "config" / "settings.yaml"

# Cache loaded config
_config_cache = None

def load_config() -> dict:
    """Load configuration from settings.yaml with caching."""
    global _config_cache

    if _config_cache is None:
        try:
            with open(CONFIG_PATH, "r") as f:
                _config_cache = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            # Missing or corrupt file: every lookup falls back to its default
            print(f"CRITICAL ERROR loading config from {CONFIG_PATH}: {e}")
            _config_cache = {}

    return _config_cache

def reset_config_cache():
    """Forget the cached settings so the next lookup reloads the file."""
    global _config_cache
    _config_cache = None

def get_config_value(key: str, default=None):
    """
    Get a specific value from configuration using dot notation.
    Example: get_config_value("share.not_available")
    """
    config = load_config()

    if "." in key:
        value = config
        try:
            for k in key.split("."):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    return config.get(key, default)

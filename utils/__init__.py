"""
Utility functions for the dessert clicker.
"""

from .logger import logger, ScreenLogAdapter
from .config_loader import load_config, get_config_value, reset_config_cache
from .adb import AdbError, adb_run, adb_connect, adb_is_device_ready, adb_start_intent
from .assets import load_dessert_image, clear_image_cache
from .display import DisplaySurface, OpenCVWindow

__all__ = [
    # Core
    'logger',
    'ScreenLogAdapter',
    'load_config',
    'get_config_value',
    'reset_config_cache',

    # ADB
    'AdbError', 'adb_run', 'adb_connect', 'adb_is_device_ready', 'adb_start_intent',

    # Display
    'load_dessert_image', 'clear_image_cache',
    'DisplaySurface', 'OpenCVWindow',
]

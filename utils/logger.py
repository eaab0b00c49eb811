"""
Shared logger for the clicker.

Each run writes to a fresh ``logs/dessert_clicker.log``; the previous runs
are kept as ``.1`` .. ``.N`` backups.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from utils.config_loader import BASE_DIR, get_config_value

LOGS_DIR = BASE_DIR / "logs"
MAIN_LOG_FILE = LOGS_DIR / "dessert_clicker.log"

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%H:%M:%S"

def run_log_handler(log_file: Path, backups: int) -> RotatingFileHandler:
    """
    File handler for one run of the game.

    The handler never rolls over by size; an existing non-empty log from
    the last run is rolled into the backups before the first record. With
    ``backups`` 0 the last run's log is appended to instead.
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(log_file, backupCount=backups, encoding="utf-8", delay=True)
    if backups > 0 and log_file.exists() and log_file.stat().st_size > 0:
        handler.doRollover()
    return handler

class ScreenLogAdapter(logging.LoggerAdapter):
    """Prefixes records with the screen instance they came from."""
    def process(self, msg, kwargs):
        return f"[Screen {self.extra['screen_id']}] {msg}", kwargs

logger = logging.getLogger("dessert_clicker")
logger.setLevel(logging.DEBUG)
logger.propagate = False

if not logger.handlers:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    file_handler = run_log_handler(MAIN_LOG_FILE, get_config_value("logging.backup_count", 10))
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(file_handler)

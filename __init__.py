"""
dessert-clicker - tap desserts, sell desserts
"""

__version__ = "1.0.0"
__author__ = "dessert_clicker"
__description__ = "Single-screen dessert clicker game"

from utils.logger import logger
from clicker.catalog import Dessert, load_catalog, select_tier
from clicker.session import SessionState, new_session, record_sale

__all__ = [
    'logger',
    'Dessert',
    'load_catalog',
    'select_tier',
    'SessionState',
    'new_session',
    'record_sale',
]

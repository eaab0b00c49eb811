"""
Game rules: dessert table, score keeping, snapshots and sharing.
"""

from .catalog import Catalog, CatalogError, Dessert, DEFAULT_DESSERTS, build_catalog, load_catalog, select_tier
from .session import SessionState, new_session, record_sale, tier_changed
from .snapshot import KEY_REVENUE, KEY_DESSERT_SOLD, save, restore, write_bundle, read_bundle
from .share import ShareUnavailableError, format_share_text, share_score

__all__ = [
    # Catalog
    'Catalog', 'CatalogError', 'Dessert', 'DEFAULT_DESSERTS',
    'build_catalog', 'load_catalog', 'select_tier',

    # Session
    'SessionState', 'new_session', 'record_sale', 'tier_changed',

    # Snapshot
    'KEY_REVENUE', 'KEY_DESSERT_SOLD', 'save', 'restore', 'write_bundle', 'read_bundle',

    # Share
    'ShareUnavailableError', 'format_share_text', 'share_score',
]

"""
Save and restore of the score across screen re-creation.

Only revenue and the sale count are kept. The current dessert is picked
again on restore, so it always matches the sale count even if the dessert
table changed in between.
"""

from typing import MutableMapping, Mapping, Optional, Tuple
from clicker.catalog import Catalog, select_tier
from clicker.session import SessionState

KEY_REVENUE = "revenue_key"
KEY_DESSERT_SOLD = "dessert_sold_key"

def save(state: SessionState) -> Tuple[int, int]:
    return state.revenue, state.units_sold

def restore(revenue: int, units_sold: int, catalog: Catalog) -> SessionState:
    return SessionState(
        revenue=revenue,
        units_sold=units_sold,
        current=select_tier(catalog, units_sold),
    )

def write_bundle(out_state: MutableMapping, state: SessionState) -> None:
    """Store the snapshot in a host instance-state bundle."""
    revenue, units_sold = save(state)
    out_state[KEY_REVENUE] = revenue
    out_state[KEY_DESSERT_SOLD] = units_sold

def read_bundle(saved_state: Optional[Mapping], catalog: Catalog) -> SessionState:
    """Restore from a bundle; missing keys read as 0."""
    saved_state = saved_state or {}
    return restore(
        int(saved_state.get(KEY_REVENUE, 0)),
        int(saved_state.get(KEY_DESSERT_SOLD, 0)),
        catalog,
    )

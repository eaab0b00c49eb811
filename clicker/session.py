"""
Score keeping for a clicker session.
"""

from dataclasses import dataclass, replace
from clicker.catalog import Catalog, Dessert, select_tier

@dataclass(frozen=True)
class SessionState:
    revenue: int
    units_sold: int
    current: Dessert

def new_session(catalog: Catalog) -> SessionState:
    return SessionState(revenue=0, units_sold=0, current=select_tier(catalog, 0))

def record_sale(state: SessionState, catalog: Catalog) -> SessionState:
    """
    Sell one unit of the current dessert.

    Revenue is credited at the price of the dessert that was current before
    the sale; the next dessert is picked from the new sale count.
    """
    units_sold = state.units_sold + 1
    return replace(
        state,
        revenue=state.revenue + state.current.price,
        units_sold=units_sold,
        current=select_tier(catalog, units_sold),
    )

def tier_changed(before: SessionState, after: SessionState) -> bool:
    """True when the dessert image has to be swapped."""
    return before.current != after.current

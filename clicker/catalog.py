"""
Dessert table and the rule that picks which dessert is being produced.
"""

from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence, Tuple, Union
from utils.config_loader import get_config_value
from utils.logger import logger

class CatalogError(ValueError):
    """Raised when a dessert table breaks the ordering rules."""

@dataclass(frozen=True)
class Dessert:
    """
    A dessert the shop can produce.

    ``threshold`` is the number of desserts that must already be sold before
    this one starts being produced; ``price`` is earned for every unit sold
    while it is the current dessert.
    """
    image_id: str
    price: int
    threshold: int

Catalog = Tuple[Dessert, ...]

# In order of when they start being produced
DEFAULT_DESSERTS = (
    ("cupcake", 5, 0),
    ("donut", 10, 2),
    ("eclair", 15, 4),
    ("froyo", 30, 6),
    ("gingerbread", 50, 8),
    ("honeycomb", 100, 10),
    ("icecreamsandwich", 500, 11),
    ("jellybean", 1000, 12),
    ("kitkat", 2000, 13),
    ("lollipop", 3000, 14),
    ("marshmallow", 4000, 15),
    ("nougat", 5000, 16),
    ("oreo", 6000, 17),
)

def _to_dessert(entry: Union[Dessert, Mapping, Sequence]) -> Dessert:
    if isinstance(entry, Dessert):
        return entry
    try:
        if isinstance(entry, Mapping):
            image_id, price, threshold = entry["image_id"], entry["price"], entry["threshold"]
        elif isinstance(entry, (str, bytes)):
            raise TypeError("expected a mapping or (image_id, price, threshold)")
        else:
            image_id, price, threshold = entry
        return Dessert(str(image_id), int(price), int(threshold))
    except KeyError as e:
        raise CatalogError(f"Dessert entry {dict(entry)} is missing {e}") from e
    except (TypeError, ValueError) as e:
        raise CatalogError(f"Invalid dessert entry {entry!r}: {e}") from e

def build_catalog(entries: Iterable) -> Catalog:
    """
    Build an immutable catalog and check its ordering.

    Entries may be ``Dessert`` objects, ``(image_id, price, threshold)``
    tuples or mappings with those keys. The first threshold must be 0 and
    thresholds must strictly increase, so exactly one dessert is current for
    any sale count.
    """
    try:
        catalog = tuple(_to_dessert(e) for e in entries)
    except TypeError as e:
        raise CatalogError(f"Catalog must be a list of desserts: {e}") from e
    if not catalog:
        raise CatalogError("Catalog must contain at least one dessert")
    if catalog[0].threshold != 0:
        raise CatalogError(f"First dessert '{catalog[0].image_id}' must start at 0, not {catalog[0].threshold}")

    for prev, curr in zip(catalog, catalog[1:]):
        if curr.threshold <= prev.threshold:
            raise CatalogError(
                f"Thresholds must strictly increase: '{prev.image_id}'={prev.threshold}, "
                f"'{curr.image_id}'={curr.threshold}"
            )
    for dessert in catalog:
        if dessert.price <= 0:
            raise CatalogError(f"Dessert '{dessert.image_id}' has non-positive price {dessert.price}")

    return catalog

def load_catalog() -> Catalog:
    """Catalog from settings.yaml, or the built-in table when none is configured."""
    entries = get_config_value("catalog")
    if entries:
        catalog = build_catalog(entries)
        logger.info(f"Loaded {len(catalog)} desserts from settings")
        return catalog
    return build_catalog(DEFAULT_DESSERTS)

def select_tier(catalog: Catalog, units_sold: int) -> Dessert:
    """Return the dessert with the highest threshold not above ``units_sold``."""
    current = catalog[0]
    for dessert in catalog:
        if units_sold >= dessert.threshold:
            current = dessert
        else:
            # Sorted by threshold, nothing later can match
            break
    return current

"""Tests for the dessert table and tier selection."""

import pytest

from clicker.catalog import (
    CatalogError,
    Dessert,
    DEFAULT_DESSERTS,
    build_catalog,
    load_catalog,
    select_tier,
)


def brute_force_tier(catalog, units_sold):
    eligible = [d for d in catalog if d.threshold <= units_sold]
    return max(eligible, key=lambda d: d.threshold)


class TestBuildCatalog:
    def test_accepts_tuples_mappings_and_desserts(self):
        catalog = build_catalog([
            ("cupcake", 5, 0),
            {"image_id": "donut", "price": 10, "threshold": 2},
            Dessert("eclair", 15, 4),
        ])
        assert catalog == (
            Dessert("cupcake", 5, 0),
            Dessert("donut", 10, 2),
            Dessert("eclair", 15, 4),
        )
        assert isinstance(catalog, tuple)

    def test_default_table(self, full_catalog):
        assert len(full_catalog) == 13
        assert full_catalog[0] == Dessert("cupcake", 5, 0)
        assert full_catalog[-1] == Dessert("oreo", 6000, 17)

    def test_empty_catalog_rejected(self):
        with pytest.raises(CatalogError, match="at least one"):
            build_catalog([])

    def test_first_threshold_must_be_zero(self):
        with pytest.raises(CatalogError, match="must start at 0"):
            build_catalog([("donut", 10, 2)])

    @pytest.mark.parametrize("second_threshold", [0, -1])
    def test_thresholds_must_strictly_increase(self, second_threshold):
        with pytest.raises(CatalogError, match="strictly increase"):
            build_catalog([("cupcake", 5, 0), ("donut", 10, second_threshold)])

    def test_price_must_be_positive(self):
        with pytest.raises(CatalogError, match="non-positive price"):
            build_catalog([("cupcake", 0, 0)])

    def test_mapping_missing_key(self):
        with pytest.raises(CatalogError, match="missing"):
            build_catalog([{"image_id": "cupcake", "price": 5}])

    @pytest.mark.parametrize(
        "entry",
        [
            {"image_id": "cupcake", "price": "five", "threshold": 0},
            {"image_id": "cupcake", "price": 5, "threshold": None},
            ("cupcake", 5),
            ("cupcake", 5, 0, "extra"),
            "cupcake",
            42,
        ],
    )
    def test_malformed_entry_raises_catalog_error(self, entry):
        with pytest.raises(CatalogError, match="Invalid dessert entry"):
            build_catalog([entry])

    def test_non_list_catalog_raises_catalog_error(self):
        with pytest.raises(CatalogError):
            build_catalog(5)

    def test_catalog_error_is_value_error(self):
        assert issubclass(CatalogError, ValueError)


class TestLoadCatalog:
    def test_defaults_without_settings(self, settings_file):
        assert load_catalog() == build_catalog(DEFAULT_DESSERTS)

    def test_catalog_from_settings(self, settings_file):
        settings_file.write_text(
            "catalog:\n"
            "  - {image_id: cupcake, price: 1, threshold: 0}\n"
            "  - {image_id: donut, price: 2, threshold: 3}\n"
        )
        assert load_catalog() == (Dessert("cupcake", 1, 0), Dessert("donut", 2, 3))

    def test_invalid_catalog_in_settings(self, settings_file):
        settings_file.write_text("catalog:\n  - {image_id: donut, price: 2, threshold: 3}\n")
        with pytest.raises(CatalogError):
            load_catalog()


class TestSelectTier:
    def test_zero_sold_is_first_dessert(self, small_catalog):
        assert select_tier(small_catalog, 0).image_id == "A"

    @pytest.mark.parametrize(
        "units_sold, expected",
        [(1, "A"), (2, "B"), (3, "B"), (4, "C"), (100, "C")],
    )
    def test_small_catalog(self, small_catalog, units_sold, expected):
        assert select_tier(small_catalog, units_sold).image_id == expected

    def test_threshold_is_inclusive(self, full_catalog):
        for dessert in full_catalog:
            assert select_tier(full_catalog, dessert.threshold) == dessert

    def test_matches_brute_force(self, full_catalog):
        for units_sold in range(0, 40):
            assert select_tier(full_catalog, units_sold) == brute_force_tier(full_catalog, units_sold)

    def test_monotonic(self, full_catalog):
        thresholds = [select_tier(full_catalog, n).threshold for n in range(0, 40)]
        assert thresholds == sorted(thresholds)

    def test_single_dessert_catalog(self):
        catalog = build_catalog([("cupcake", 5, 0)])
        assert select_tier(catalog, 0) == select_tier(catalog, 1000) == catalog[0]

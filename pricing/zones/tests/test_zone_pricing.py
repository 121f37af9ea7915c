"""
Unit Tests for Zone Pricing

Tests zone resolution, carrier cost lookup, markup, and the batch calculator.

Run with: pytest pricing/zones/tests/test_zone_pricing.py -v
"""

import builtins

import pytest
import polars as pl

from pricing.zones import (
    calculate_costs,
    resolve_zone,
    lookup_carrier_cost,
    apply_markup,
    quote_destination,
    ZONE_LABELS,
    VERSION,
)
from pricing.zones.calculate_costs import supplement_shipments
from pricing.zones.data import load_rates, load_rate_sheet, load_zones
from pricing.zones.lookup import RATE_TABLE, COUNTRY_TO_ZONE
from pricing.zones.scripts import calculator


ZONES = ["1", "2", "3", "4"]


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def shipments():
    """Mixed shipments: covered, messy input, unsupported, heavy, zero weight."""
    return pl.DataFrame({
        "destination_country": ["UK ", "Ghana", "Atlantis", " canada", "Australia", "usa"],
        "weight_kg": [0.5, 2.2, 1.0, 25.0, 0.0, 7.5],
    })


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a temp file and return its path."""
    def _write(name: str, text: str):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


# =============================================================================
# ZONE RESOLUTION TESTS
# =============================================================================

class TestResolveZone:
    """Tests for country to zone resolution."""

    @pytest.mark.parametrize("country", ["UK ", "uk", " United Kingdom"])
    def test_uk_variants_resolve_to_zone_1(self, country):
        """Case and surrounding whitespace are ignored."""
        assert resolve_zone(country) == "1"

    def test_aliases_share_zone(self):
        """England, Scotland and the space-less alias all map to zone 1."""
        assert resolve_zone("England") == "1"
        assert resolve_zone("SCOTLAND") == "1"
        assert resolve_zone("greatbritain") == "1"

    def test_one_country_per_zone(self):
        assert resolve_zone("Nigeria") == "2"
        assert resolve_zone("United States of America") == "3"
        assert resolve_zone("New Zealand") == "4"

    def test_accented_name(self):
        """Non-ASCII names are lower-cased too."""
        assert resolve_zone("CÔTE D'IVOIRE") == "2"

    def test_unknown_country_not_found(self):
        assert resolve_zone("Atlantis") is None

    @pytest.mark.parametrize("country", ["", "   ", "\t\n", None])
    def test_empty_input_not_found(self, country):
        assert resolve_zone(country) is None

    def test_inner_spacing_must_match(self):
        """Only surrounding whitespace is trimmed."""
        assert resolve_zone("united  kingdom") is None

    def test_every_map_key_resolves(self):
        for country, zone in COUNTRY_TO_ZONE.items():
            assert resolve_zone(country.upper()) == zone

    def test_country_map_is_read_only(self):
        with pytest.raises(TypeError):
            COUNTRY_TO_ZONE["atlantis"] = "1"


# =============================================================================
# CARRIER COST LOOKUP TESTS
# =============================================================================

class TestLookupCarrierCost:
    """Tests for the ceiling lookup over the rate sheet."""

    @pytest.mark.parametrize("zone", ZONES)
    @pytest.mark.parametrize("weight", [0, 0.0, -0.5, -100])
    def test_non_positive_weight_costs_nothing(self, weight, zone):
        assert lookup_carrier_cost(weight, zone) == 0

    @pytest.mark.parametrize("zone", ZONES)
    def test_every_breakpoint_uses_its_own_row(self, zone):
        """Weight exactly on a breakpoint uses that row's rate."""
        for row in RATE_TABLE:
            expected = int(row.rate(zone) + 0.5)
            assert lookup_carrier_cost(row.weight_kg, zone) == expected

    def test_fractional_rate_rounds(self):
        """0.5 kg zone 1 is 29372.63 on the sheet."""
        assert lookup_carrier_cost(0.5, "1") == 29373
        assert lookup_carrier_cost(0.5, "3") == 34761

    def test_between_breakpoints_uses_next_row(self):
        """0.6 kg falls in the 1 kg row; 2.2 kg in the 2.5 kg row."""
        assert lookup_carrier_cost(0.6, "1") == 32500
        assert lookup_carrier_cost(2.2, "1") == 41000
        assert lookup_carrier_cost(8.0, "2") == 43900

    def test_below_first_breakpoint_uses_first_row(self):
        assert lookup_carrier_cost(0.01, "4") == 31245

    @pytest.mark.parametrize("zone", ZONES)
    def test_above_heaviest_breakpoint_uses_heaviest_row(self, zone):
        heaviest = RATE_TABLE[-1]
        expected = int(heaviest.rate(zone) + 0.5)
        assert lookup_carrier_cost(heaviest.weight_kg + 0.1, zone) == expected
        assert lookup_carrier_cost(1000, zone) == expected

    def test_heavy_uk_shipment(self):
        assert lookup_carrier_cost(25, "1") == 135500

    def test_nan_weight_uses_heaviest_row(self):
        assert lookup_carrier_cost(float("nan"), "1") == 135500
        assert lookup_carrier_cost(float("nan"), "4") == lookup_carrier_cost(1000, "4")

    def test_unknown_zone_raises(self):
        with pytest.raises(ValueError, match="Unknown zone"):
            lookup_carrier_cost(1.0, "5")

    def test_repeatable(self):
        assert lookup_carrier_cost(3.3, "2") == lookup_carrier_cost(3.3, "2")


# =============================================================================
# MARKUP TESTS
# =============================================================================

class TestApplyMarkup:
    """Tests for sell price markup."""

    def test_twenty_percent(self):
        assert apply_markup(1000, 20) == 1200

    def test_zero_markup(self):
        assert apply_markup(1000, 0) == 1000

    def test_default_markup_is_twenty_percent(self):
        assert apply_markup(1000) == 1200

    def test_negative_markup_is_discount(self):
        assert apply_markup(1000, -10) == 900

    def test_rounds_half_up(self):
        """999 * 1.2 = 1198.8 -> 1199; 5 * 1.5 = 7.5 -> 8."""
        assert apply_markup(999, 20) == 1199
        assert apply_markup(5, 50) == 8

    def test_fractional_cost(self):
        assert apply_markup(29372.63, 0) == 29373


# =============================================================================
# QUOTE TESTS
# =============================================================================

class TestQuoteDestination:
    """Tests for resolve + lookup + markup in one call."""

    def test_uk_quote(self):
        quote = quote_destination(" UK", 2.2)
        assert quote.zone == "1"
        assert quote.zone_label == ZONE_LABELS["1"]
        assert quote.country == "uk"
        assert quote.carrier_cost == 41000
        assert quote.markup_percent == 20
        assert quote.sell_price == 49200

    def test_custom_markup(self):
        quote = quote_destination("ghana", 1.0, markup_percent=10)
        assert quote.carrier_cost == 16800
        assert quote.sell_price == 18480

    def test_unsupported_destination(self):
        assert quote_destination("Atlantis", 1.0) is None

    def test_zero_weight_quote(self):
        quote = quote_destination("canada", 0)
        assert quote.carrier_cost == 0
        assert quote.sell_price == 0


# =============================================================================
# REFERENCE DATA TESTS
# =============================================================================

class TestReferenceData:
    """Tests for rate sheet and country map loading."""

    def test_rate_sheet_sorted_and_unique(self):
        sheet = load_rate_sheet()
        weights = sheet["weight_kg"].to_list()
        assert weights == sorted(weights)
        assert len(set(weights)) == len(weights)
        assert len(weights) == 12

    def test_rate_brackets_cover_every_weight(self):
        """First bracket open below, last open above."""
        rates = load_rates()
        assert len(rates) == 12 * 4
        zone_1 = rates.filter(pl.col("zone") == "1").sort("weight_kg")
        assert zone_1["weight_kg_lower"][0] == float("-inf")
        assert zone_1["weight_kg_upper"][-1] == float("inf")
        assert zone_1["weight_kg_lower"][1] == pytest.approx(0.5)
        assert zone_1["weight_kg_upper"][1] == pytest.approx(1.0)

    def test_rate_table_matches_sheet(self):
        assert len(RATE_TABLE) == len(load_rate_sheet())
        assert RATE_TABLE[0].weight_kg == pytest.approx(0.5)
        assert RATE_TABLE[-1].weight_kg == pytest.approx(20.0)

    def test_unsorted_sheet_is_sorted_on_load(self, write_csv):
        path = write_csv(
            "rates.csv",
            "weight_kg,zone_1,zone_2,zone_3,zone_4\n"
            "2,20,21,22,23\n"
            "1,10,11,12,13\n",
        )
        assert load_rate_sheet(path)["weight_kg"].to_list() == [1.0, 2.0]

    def test_empty_rate_sheet_rejected(self, write_csv):
        path = write_csv("rates.csv", "weight_kg,zone_1,zone_2,zone_3,zone_4\n")
        with pytest.raises(ValueError, match="no rate rows"):
            load_rate_sheet(path)

    def test_duplicate_breakpoint_rejected(self, write_csv):
        path = write_csv(
            "rates.csv",
            "weight_kg,zone_1,zone_2,zone_3,zone_4\n"
            "1,10,11,12,13\n"
            "1,20,21,22,23\n",
        )
        with pytest.raises(ValueError, match="duplicate weight breakpoints"):
            load_rate_sheet(path)

    def test_missing_zone_column_rejected(self, write_csv):
        path = write_csv("rates.csv", "weight_kg,zone_1\n1,10\n")
        with pytest.raises(ValueError, match="missing columns"):
            load_rate_sheet(path)

    def test_country_keys_normalized(self):
        zones = load_zones()
        for country in zones["country"]:
            assert country == country.strip().lower()

    def test_non_normalized_country_rejected(self, write_csv):
        path = write_csv("countries.csv", "country,zone\nUK,1\n")
        with pytest.raises(ValueError, match="not trimmed/lower-cased"):
            load_zones(path)

    def test_unknown_zone_rejected(self, write_csv):
        path = write_csv("countries.csv", "country,zone\natlantis,5\n")
        with pytest.raises(ValueError, match="unknown zone ids"):
            load_zones(path)

    def test_duplicate_country_rejected(self, write_csv):
        path = write_csv("countries.csv", "country,zone\nuk,1\nuk,2\n")
        with pytest.raises(ValueError, match="duplicate country keys"):
            load_zones(path)

    def test_string_paths_accepted(self, write_csv):
        rates = write_csv(
            "rates.csv",
            "weight_kg,zone_1,zone_2,zone_3,zone_4\n"
            "1,10,11,12,13\n",
        )
        countries = write_csv("countries.csv", "country,zone\nuk,1\n")
        assert load_rate_sheet(str(rates))["weight_kg"].to_list() == [1.0]
        assert len(load_rates(str(rates))) == 4
        assert load_zones(str(countries))["zone"].to_list() == ["1"]

    def test_string_path_errors_name_the_file(self, write_csv):
        path = write_csv("bad_rates.csv", "weight_kg,zone_1\n1,10\n")
        with pytest.raises(ValueError, match="bad_rates.csv is missing columns"):
            load_rate_sheet(str(path))

    def test_zone_labels_read_only(self):
        with pytest.raises(TypeError):
            ZONE_LABELS["1"] = "Moon (Zone 1)"
        assert ZONE_LABELS["1"] == "UK (Zone 1)"


# =============================================================================
# BATCH CALCULATOR TESTS
# =============================================================================

class TestSupplementShipments:
    """Tests for zone lookup columns."""

    def test_zone_columns(self, shipments):
        df = supplement_shipments(shipments)
        assert df["shipping_zone"].to_list() == ["1", "2", None, "3", "4", "3"]
        assert df["zone_covered"].to_list() == [True, True, False, True, True, True]
        assert df["zone_label"][0] == "UK (Zone 1)"
        assert df["zone_label"][2] is None

    def test_country_normalized(self, shipments):
        df = supplement_shipments(shipments)
        assert df["country_normalized"][0] == "uk"
        assert df["country_normalized"][3] == "canada"

    def test_null_country_not_covered(self):
        df = supplement_shipments(pl.DataFrame({
            "destination_country": [None, "uk"],
            "weight_kg": [1.0, 1.0],
        }, schema={"destination_country": pl.Utf8, "weight_kg": pl.Float64}))
        assert df["zone_covered"].to_list() == [False, True]

    def test_missing_column_raises(self):
        with pytest.raises(ValueError, match="Missing required input columns"):
            supplement_shipments(pl.DataFrame({"weight_kg": [1.0]}))


class TestCalculateCosts:
    """Tests for the batch carrier cost and sell price."""

    def test_costs(self, shipments):
        df = calculate_costs(shipments)
        assert df["cost_carrier"].to_list() == [29373, 21200, None, 160700, 0, 84400]

    def test_sell_price_default_markup(self, shipments):
        df = calculate_costs(shipments)
        assert df["markup_percent"].to_list() == [20.0] * 6
        assert df["price_sell"][1] == 25440
        assert df["price_sell"][2] is None
        assert df["price_sell"][4] == 0

    def test_markup_column_with_nulls(self):
        df = calculate_costs(pl.DataFrame({
            "destination_country": ["uk", "uk"],
            "weight_kg": [1.0, 1.0],
            "markup_percent": [None, 0.0],
        }))
        assert df["price_sell"].to_list() == [39000, 32500]

    def test_matches_scalar_lookup(self):
        """Batch and scalar lookups agree, including breakpoints and edges."""
        weights = [-1.0, 0.0, 0.01, 0.5, 0.75, 1.0, 2.5, 2.6, 9.99, 20.0, 20.01, 50.0]
        countries = ["uk", "ghana", "usa", "australia"]
        rows = [(c, w) for c in countries for w in weights]
        df = calculate_costs(pl.DataFrame(
            {"destination_country": [c for c, _ in rows], "weight_kg": [w for _, w in rows]}
        ))
        for (country, weight), cost in zip(rows, df["cost_carrier"].to_list()):
            assert cost == lookup_carrier_cost(weight, resolve_zone(country))

    def test_row_order_preserved(self, shipments):
        df = calculate_costs(shipments)
        assert df["destination_country"].to_list() == shipments["destination_country"].to_list()
        assert df["weight_kg"].to_list() == shipments["weight_kg"].to_list()

    def test_no_rows_added_or_lost(self, shipments):
        assert len(calculate_costs(shipments)) == len(shipments)

    def test_null_weight_raises(self):
        df = pl.DataFrame({
            "destination_country": ["uk"],
            "weight_kg": [None],
        }, schema={"destination_country": pl.Utf8, "weight_kg": pl.Float64})
        with pytest.raises(ValueError, match="no matching rate bracket"):
            calculate_costs(df)

    def test_nan_weight_uses_heaviest_bracket(self):
        df = calculate_costs(pl.DataFrame({
            "destination_country": ["uk", "ghana"],
            "weight_kg": [float("nan"), 1.0],
        }))
        assert df["cost_carrier"].to_list() == [135500, lookup_carrier_cost(1.0, "2")]
        assert df["cost_carrier"][0] == lookup_carrier_cost(float("nan"), "1")

    def test_version_stamp(self, shipments):
        df = calculate_costs(shipments)
        assert df["calculator_version"][0] == VERSION

    def test_idempotent(self, shipments):
        assert calculate_costs(shipments).equals(calculate_costs(shipments))


# =============================================================================
# CLI TESTS
# =============================================================================

class TestCalculatorScript:
    """Tests for the interactive zone calculator."""

    def _run(self, monkeypatch, answers):
        replies = iter(answers)
        monkeypatch.setattr(builtins, "input", lambda prompt="": next(replies))
        calculator.main()

    def test_prints_sell_price(self, monkeypatch, capsys):
        self._run(monkeypatch, ["United Kingdom", "2.2", ""])
        out = capsys.readouterr().out
        assert "UK (Zone 1)" in out
        assert "41,000" in out
        assert "49,200" in out

    def test_unsupported_destination(self, monkeypatch, capsys):
        self._run(monkeypatch, ["Atlantis", "1", "15"])
        assert "Unsupported destination: 'Atlantis'" in capsys.readouterr().out

    def test_bad_weight_reraises(self, monkeypatch, capsys):
        with pytest.raises(ValueError):
            self._run(monkeypatch, ["uk", "heavy"])
        assert "Error:" in capsys.readouterr().out

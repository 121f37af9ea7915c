"""
Zone Pricing Lookups

Scalar operations for a single destination, used by request handlers:

    resolve_zone("United Kingdom")      -> "1"
    lookup_carrier_cost(2.2, "1")       -> 41000
    apply_markup(41000, 20)             -> 49200
    quote_destination("uk", 2.2)        -> ZoneQuote(...)

The country map and rate sheet are loaded once at import into read-only
structures. Nothing here raises for an unknown country or a non-positive
weight; callers branch on None / 0.
"""

import math
from bisect import bisect_left
from types import MappingProxyType
from typing import Mapping, NamedTuple

from shared.rounding import round_half_up

from .data import (
    ZoneId,
    ZONE_IDS,
    ZONE_LABELS,
    ZONE_RATE_COLS,
    DEFAULT_PROFIT_MARKUP_PERCENT,
    load_rate_sheet,
    load_zones,
    normalize_country,
)


# =============================================================================
# STATIC TABLES
# =============================================================================

class RateRow(NamedTuple):
    """One rate sheet breakpoint with the carrier cost for each zone."""
    weight_kg: float
    zone_1: float
    zone_2: float
    zone_3: float
    zone_4: float

    def rate(self, zone: ZoneId) -> float:
        return getattr(self, f"zone_{zone}")


class ZoneQuote(NamedTuple):
    """Priced destination: zone, carrier cost and sell price."""
    country: str
    zone: ZoneId
    zone_label: str
    weight_kg: float
    carrier_cost: int
    markup_percent: float
    sell_price: int


def _build_country_map() -> Mapping[str, ZoneId]:
    zones = load_zones()
    return MappingProxyType(dict(zones.iter_rows()))


def _build_rate_table() -> tuple[RateRow, ...]:
    sheet = load_rate_sheet().select(["weight_kg"] + ZONE_RATE_COLS)
    return tuple(RateRow(*row) for row in sheet.iter_rows())


COUNTRY_TO_ZONE: Mapping[str, ZoneId] = _build_country_map()

RATE_TABLE: tuple[RateRow, ...] = _build_rate_table()

# Breakpoints in ascending order, parallel to RATE_TABLE
_BREAKPOINTS: tuple[float, ...] = tuple(row.weight_kg for row in RATE_TABLE)


# =============================================================================
# OPERATIONS
# =============================================================================

def resolve_zone(country_name: str | None) -> ZoneId | None:
    """
    Resolve a free-text country name to its pricing zone.

    Matching ignores surrounding whitespace and case. Returns None for empty
    or unsupported destinations.
    """
    key = normalize_country(country_name)
    if not key:
        return None
    return COUNTRY_TO_ZONE.get(key)


def lookup_carrier_cost(weight_kg: float, zone: ZoneId) -> int:
    """
    Carrier cost for a weight in a zone, rounded to whole units.

    Ceiling lookup: the first breakpoint at or above the weight is used, so a
    weight exactly on a breakpoint takes that row's rate. Weights above the
    heaviest breakpoint use the heaviest row's rate, and so does a NaN weight.
    Non-positive weights cost 0.

    Raises:
        ValueError: If zone is not one of the known zone ids
    """
    if zone not in ZONE_IDS:
        raise ValueError(f"Unknown zone {zone!r}, expected one of {ZONE_IDS}")

    if weight_kg <= 0:
        return 0

    index = bisect_left(_BREAKPOINTS, weight_kg)
    if index == len(RATE_TABLE) or math.isnan(weight_kg):
        # Heavier than every breakpoint
        index = len(RATE_TABLE) - 1

    return round_half_up(RATE_TABLE[index].rate(zone))


def apply_markup(
    cost: float,
    markup_percent: float = DEFAULT_PROFIT_MARKUP_PERCENT,
) -> int:
    """Sell price = cost * (1 + markup / 100), rounded. Negative markup is a discount."""
    return round_half_up(cost * (1 + markup_percent / 100))


def quote_destination(
    country_name: str | None,
    weight_kg: float,
    markup_percent: float = DEFAULT_PROFIT_MARKUP_PERCENT,
) -> ZoneQuote | None:
    """
    Resolve, look up and mark up in one call.

    Returns None when the destination is unsupported.
    """
    zone = resolve_zone(country_name)
    if zone is None:
        return None

    carrier_cost = lookup_carrier_cost(weight_kg, zone)
    return ZoneQuote(
        country=normalize_country(country_name),
        zone=zone,
        zone_label=ZONE_LABELS[zone],
        weight_kg=weight_kg,
        carrier_cost=carrier_cost,
        markup_percent=markup_percent,
        sell_price=apply_markup(carrier_cost, markup_percent),
    )


__all__ = [
    "COUNTRY_TO_ZONE",
    "RATE_TABLE",
    "RateRow",
    "ZoneQuote",
    "resolve_zone",
    "lookup_carrier_cost",
    "apply_markup",
    "quote_destination",
]

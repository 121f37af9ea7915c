"""
Zone Pricing Module

Country to zone resolution, carrier cost lookup by weight and zone, and
profit markup to a sell price.
"""

from .calculate_costs import calculate_costs
from .lookup import (
    RateRow,
    ZoneQuote,
    resolve_zone,
    lookup_carrier_cost,
    apply_markup,
    quote_destination,
)
from .data import ZoneId, ZONE_LABELS, DEFAULT_PROFIT_MARKUP_PERCENT
from .version import VERSION

__all__ = [
    "calculate_costs",
    "RateRow",
    "ZoneQuote",
    "resolve_zone",
    "lookup_carrier_cost",
    "apply_markup",
    "quote_destination",
    "ZoneId",
    "ZONE_LABELS",
    "DEFAULT_PROFIT_MARKUP_PERCENT",
    "VERSION",
]

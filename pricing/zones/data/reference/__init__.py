"""
Zone Reference Data

Static configuration: zone ids and labels, default markup, and the CSV rate
sheet and country map in this directory.
"""

from .zones import ZoneId, ZONE_IDS, ZONE_LABELS, ZONE_RATE_COL_PREFIX
from .markup import DEFAULT_PROFIT_MARKUP_PERCENT

__all__ = [
    "ZoneId",
    "ZONE_IDS",
    "ZONE_LABELS",
    "ZONE_RATE_COL_PREFIX",
    "DEFAULT_PROFIT_MARKUP_PERCENT",
]

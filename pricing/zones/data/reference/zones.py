"""
Zone Configuration

Destination countries are grouped into four pricing zones, one rate column
each in zone_rates.csv. Zone ids are strings so they match the zone column
suffix and the countries.csv values as read.
"""

from types import MappingProxyType
from typing import Literal, Mapping

ZoneId = Literal["1", "2", "3", "4"]

ZONE_IDS: tuple[ZoneId, ...] = ("1", "2", "3", "4")

ZONE_LABELS: Mapping[ZoneId, str] = MappingProxyType({
    "1": "UK (Zone 1)",
    "2": "West Africa (Zone 2)",
    "3": "Canada & USA (Zone 3)",
    "4": "Australia (Zone 4)",
})

# Rate sheet column for each zone
ZONE_RATE_COL_PREFIX = "zone_"

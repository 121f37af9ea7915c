"""
Booking Pricing Data

Static tariff configuration.
"""

from .reference.tariff import (
    Tariff,
    DEFAULT_TARIFF,
    BASE_RATE,
    PER_KG_RATE,
    FUEL_SURCHARGE_RATE,
    INSURANCE_RATE,
    FRAGILE_FEE,
    VAT_RATE,
)

__all__ = [
    "Tariff",
    "DEFAULT_TARIFF",
    "BASE_RATE",
    "PER_KG_RATE",
    "FUEL_SURCHARGE_RATE",
    "INSURANCE_RATE",
    "FRAGILE_FEE",
    "VAT_RATE",
]

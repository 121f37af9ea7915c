"""
Booking Surcharges Package

Exports all surcharge classes.

Surcharges are added on top of the base shipping charge, before VAT:
- Fuel (FUEL)              - percentage of base shipping, always applies
- Premium Insurance (INS)  - percentage of declared value, opt-in
- Fragile Handling (FRG)   - flat fee, opt-in

Usage:
    from pricing.booking.surcharges import ALL
"""

from shared.surcharges import Surcharge
from ..data import Tariff
from .fuel import FUEL
from .insurance import INS
from .fragile import FRG


# All surcharges - order matches the breakdown order
ALL: list[type[Surcharge]] = [FUEL, INS, FRG]


# =============================================================================
# VALIDATION
# =============================================================================

def validate_surcharges() -> None:
    """
    Validate surcharge configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []

    names = [s.name for s in ALL]
    duplicated = sorted({n for n in names if names.count(n) > 1})
    if duplicated:
        errors.append(f"duplicate surcharge names: {duplicated}")

    for s in ALL:
        # Rate or fee must come from the tariff
        if s.tariff_field not in Tariff._fields:
            errors.append(f"{s.name}: tariff_field '{s.tariff_field}' not found in Tariff")

        # Percentage surcharges can't be applied to the base column itself
        if s.basis is not None and s.basis == s.cost_col():
            errors.append(f"{s.name}: basis '{s.basis}' refers to its own cost column")

    if errors:
        raise ValueError("Surcharge configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_surcharges()

__all__ = [
    # Base
    "Surcharge",
    # Surcharge classes
    "FUEL",
    "INS",
    "FRG",
    # Lists
    "ALL",
    # Validation
    "validate_surcharges",
]

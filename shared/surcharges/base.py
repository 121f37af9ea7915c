"""
Surcharge Base Class

Shared base class for all booking surcharges.
"""

from abc import ABC
from typing import Any

import polars as pl

from shared.rounding import round_half_up_expr


# =============================================================================
# BASE CLASS
# =============================================================================

class Surcharge(ABC):
    """
    Base class for all surcharges.

    A surcharge is either a percentage of another column (fuel on the base
    rate, insurance on the declared value) or a flat fee (fragile handling).
    The actual numbers live on a tariff object so they can be changed without
    touching the surcharge classes.

    Attributes:
        IDENTITY
            name          - Short code (e.g., "FUEL", "INS")

        PRICING
            tariff_field  - Tariff attribute holding the rate or flat fee
            basis         - Column the rate is applied to; None for flat fees
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str

    # -------------------------------------------------------------------------
    # PRICING
    # -------------------------------------------------------------------------
    tariff_field: str
    basis: str | None = None

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def is_flat(cls) -> bool:
        return cls.basis is None

    @classmethod
    def price(cls, tariff: Any) -> float:
        """Rate (for percentage surcharges) or fee (for flat ones) from the tariff."""
        return getattr(tariff, cls.tariff_field)

    @classmethod
    def cost(cls, tariff: Any) -> pl.Expr:
        """Rounded amount charged when the surcharge applies."""
        if cls.is_flat():
            return round_half_up_expr(pl.lit(cls.price(tariff), dtype=pl.Float64))
        return round_half_up_expr(pl.col(cls.basis) * cls.price(tariff))

    @classmethod
    def conditions(cls) -> pl.Expr:
        """
        Polars expression for when this surcharge triggers.

        Default returns True (applies to every booking).
        Override for optional surcharges with specific conditions.
        """
        return pl.lit(True)

    @classmethod
    def flag_col(cls) -> str:
        return f"surcharge_{cls.name.lower()}"

    @classmethod
    def cost_col(cls) -> str:
        return f"cost_{cls.name.lower()}"

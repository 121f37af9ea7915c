"""
Fuel Surcharge (FUEL)

Percentage of base shipping, applied to every booking.
"""

from shared.surcharges import Surcharge


class FUEL(Surcharge):
    """Fuel surcharge - percentage of the base shipping charge."""

    # Identity
    name = "FUEL"

    # Pricing (percentage of cost_base)
    tariff_field = "fuel_surcharge_rate"
    basis = "cost_base"

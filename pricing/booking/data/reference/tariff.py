"""
Booking Tariff Configuration

Enterprise booking pricing: base + fuel 10% + insurance 1.5% of declared
value + fragile fee 500 + VAT 7.5%. Amounts are in whole NGN.

To price with a different tariff, pass a modified copy:

    tariff = DEFAULT_TARIFF._replace(vat_rate=0.08)
    calculate_booking_price(2.0, tariff=tariff)
"""

from typing import NamedTuple


BASE_RATE = 500               # Flat charge per booking
PER_KG_RATE = 150             # Charge per kg of weight
FUEL_SURCHARGE_RATE = 0.10    # 10% of base shipping
INSURANCE_RATE = 0.015        # 1.5% of declared value (premium insurance only)
FRAGILE_FEE = 500             # Flat fee for fragile items
VAT_RATE = 0.075              # 7.5% of subtotal


class Tariff(NamedTuple):
    """Rates and fees used by the booking price calculator."""
    base_rate: float = BASE_RATE
    per_kg_rate: float = PER_KG_RATE
    fuel_surcharge_rate: float = FUEL_SURCHARGE_RATE
    insurance_rate: float = INSURANCE_RATE
    fragile_fee: float = FRAGILE_FEE
    vat_rate: float = VAT_RATE


DEFAULT_TARIFF = Tariff()

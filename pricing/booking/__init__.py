"""
Booking Pricing Module

Itemized booking price: base shipping, fuel surcharge, insurance, fragile
fee and VAT.
"""

from .calculate_costs import calculate_costs
from .price import BookingPriceBreakdown, calculate_booking_price
from .data import Tariff, DEFAULT_TARIFF
from .version import VERSION

__all__ = [
    "calculate_costs",
    "calculate_booking_price",
    "BookingPriceBreakdown",
    "Tariff",
    "DEFAULT_TARIFF",
    "VERSION",
]

"""
Shared Surcharges

Base class for booking surcharges.
"""

from .base import Surcharge

__all__ = [
    "Surcharge",
]

"""Booking reference data."""

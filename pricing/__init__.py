"""
DMX Pricing

Zone-based shipping cost lookup and booking price breakdowns.
"""

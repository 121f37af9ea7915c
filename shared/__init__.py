"""
Shared

Code shared by the zone and booking calculators.
"""

"""
Profit Markup Configuration

Sell price = carrier cost * (1 + markup / 100). Admins may quote with a
different markup; this is the value used when none is given.
"""

DEFAULT_PROFIT_MARKUP_PERCENT = 20    # 20% over carrier cost

"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

# Week-over-week rate movement, in percentage points (exclusive bounds).
TREND_IMPROVING_THRESHOLD = Decimal("2")
TREND_DECLINING_THRESHOLD = Decimal("-2")

RATE_QUANTUM = Decimal("0.01")
DAYS_PER_WEEK = 7

ISO_DATE_FORMAT = "%Y-%m-%d"

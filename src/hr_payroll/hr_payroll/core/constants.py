"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

PERIOD_FORMAT = "%Y-%m"

# Flat deduction (taxes/insurance) applied to every computed gross pay.
DEDUCTION_RATE = Decimal("0.05")
DEDUCTION_PERCENTAGE = 5

MONEY_QUANTUM = Decimal("0.01")

NO_ATTENDANCE_MESSAGE = "No approved attendance records found for this period"
NO_ASSIGNMENT_MESSAGE = "No site assignment found for this employee"
NO_WAGE_RATE_MESSAGE = "No wage rate configured for this employee"

DEFAULT_PAYOUT_LOCK_TIMEOUT = 10

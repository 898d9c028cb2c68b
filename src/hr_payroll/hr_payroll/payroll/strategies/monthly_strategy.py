from __future__ import annotations

from decimal import Decimal

from ...assignments.model import SiteAssignment
from ...common.money import to_money
from ...core.enums import WageSource
from .base import WageStrategy


class MonthlyWageStrategy(WageStrategy):
    """Monthly salary pro-rated by the days worked out of the days in that month."""

    source = WageSource.MONTHLY

    def gross_pay(self, *, assignment: SiteAssignment, days_worked: int, days_in_month: int) -> Decimal:
        # Multiply before dividing so whole-currency results stay exact.
        return to_money(assignment.wage_rate_per_month) * days_worked / Decimal(days_in_month)

from __future__ import annotations

from decimal import Decimal

from ...assignments.model import SiteAssignment
from ...common.money import to_money
from ...core.enums import WageSource
from .base import WageStrategy


class DailyWageStrategy(WageStrategy):
    source = WageSource.DAILY

    def gross_pay(self, *, assignment: SiteAssignment, days_worked: int, days_in_month: int) -> Decimal:
        return to_money(assignment.wage_rate_per_day) * days_worked

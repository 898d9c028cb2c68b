from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..assignments.model import SiteAssignment
from ..common.money import to_money
from .strategies.base import WageStrategy
from .strategies.daily_strategy import DailyWageStrategy
from .strategies.monthly_strategy import MonthlyWageStrategy


@dataclass
class WageStrategyFactory:
    """Factory Pattern: a positive monthly rate wins over a daily rate."""

    def for_assignment(self, assignment: SiteAssignment) -> Optional[WageStrategy]:
        if to_money(assignment.wage_rate_per_month) > 0:
            return MonthlyWageStrategy()
        if to_money(assignment.wage_rate_per_day) > 0:
            return DailyWageStrategy()
        return None

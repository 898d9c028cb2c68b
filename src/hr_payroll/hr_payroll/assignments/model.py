from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class SiteAssignment:
    """Domain entity: an employee's wage terms at a client site.

    ``end_date`` is None while the assignment is still running; reassigning an
    employee closes the old row and opens a new one.
    """

    assignment_id: int
    employee_id: int
    site_id: int
    site_name: str
    start_date: date
    end_date: Optional[date] = None
    wage_rate_per_day: Optional[Decimal] = None
    wage_rate_per_month: Optional[Decimal] = None

    @property
    def is_active(self) -> bool:
        return self.end_date is None

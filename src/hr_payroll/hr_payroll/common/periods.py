from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..core.exceptions import ValidationError

_PERIOD_RE = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True)
class Period:
    """A payroll period: one calendar month, written as ``YYYY-MM``."""

    year: int
    month: int

    @classmethod
    def parse(cls, value: str) -> "Period":
        m = _PERIOD_RE.match((value or "").strip())
        if not m:
            raise ValidationError(f"Invalid period {value!r}, expected YYYY-MM")
        year, month = int(m.group(1)), int(m.group(2))
        if not 1 <= month <= 12 or year < 1:
            raise ValidationError(f"Invalid period {value!r}, expected YYYY-MM")
        return cls(year=year, month=month)

    @property
    def key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def start(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def end(self) -> date:
        return date(self.year, self.month, self.days_in_month)

    @property
    def end_of_day(self) -> datetime:
        return datetime.combine(self.end, time.max)

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def overlaps(self, start_date: date, end_date: Optional[date]) -> bool:
        # Open-ended ranges (no end date) are still running.
        if start_date > self.end:
            return False
        return end_date is None or end_date >= self.start

    def __str__(self) -> str:
        return self.key

from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import SiteAssignment


class AssignmentRepository(Protocol):
    def list_overlapping(self, *, employee_id: int, start_date: date, end_date: date) -> Sequence[SiteAssignment]:
        """Assignments whose date range intersects [start_date, end_date], in store order."""

        raise NotImplementedError

    def list_active_employee_ids(self) -> Sequence[int]:
        """Distinct employees with at least one open-ended assignment."""

        raise NotImplementedError

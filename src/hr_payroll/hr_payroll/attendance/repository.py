from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_employee(
        self,
        *,
        employee_id: int,
        start_date: date,
        end_date: date,
        status: AttendanceStatus = AttendanceStatus.APPROVED,
    ) -> Sequence[AttendanceRecord]:
        """Records with ``work_date`` in [start_date, end_date], oldest first."""

        raise NotImplementedError

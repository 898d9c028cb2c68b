from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one workday's presence of an employee.

    Created on check-in, updated on check-out and again when a manager sets
    the final status. Only ``approved`` records count toward payroll.
    """

    attendance_id: int
    employee_id: int
    work_date: date
    check_in_time: datetime
    status: AttendanceStatus
    check_out_time: Optional[datetime] = None
    location: Optional[GeoPoint] = None
    selfie_url: Optional[str] = None
    approved_by: Optional[int] = None
    notes: Optional[str] = None

    @property
    def is_approved(self) -> bool:
        return self.status == AttendanceStatus.APPROVED

from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord, GeoPoint
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(
        self,
        *,
        employee_id: int,
        start_date: date,
        end_date: date,
        status: AttendanceStatus = AttendanceStatus.APPROVED,
    ) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, employee_id, work_date, check_in_time, check_out_time,
                       status, latitude, longitude, selfie_url, approved_by, notes
                FROM attendance_records
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s AND status=%s
                ORDER BY work_date ASC, attendance_id ASC
                """,
                (int(employee_id), start_date, end_date, status.value),
            )
            return [self._to_record(r) for r in fetchall(cur)]

    @staticmethod
    def _to_record(r: dict) -> AttendanceRecord:
        location = None
        if r.get("latitude") is not None and r.get("longitude") is not None:
            location = GeoPoint(latitude=float(r["latitude"]), longitude=float(r["longitude"]))
        approved_by = r.get("approved_by")
        return AttendanceRecord(
            attendance_id=int(r["attendance_id"]),
            employee_id=int(r["employee_id"]),
            work_date=r["work_date"],
            check_in_time=r["check_in_time"],
            check_out_time=r.get("check_out_time"),
            status=AttendanceStatus(r["status"]),
            location=location,
            selfie_url=r.get("selfie_url"),
            approved_by=int(approved_by) if approved_by is not None else None,
            notes=r.get("notes"),
        )

from __future__ import annotations

from datetime import date
from typing import Sequence

from ..common.money import to_money
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import SiteAssignment
from .repository import AssignmentRepository


class MySQLAssignmentRepository(AssignmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_overlapping(self, *, employee_id: int, start_date: date, end_date: date) -> Sequence[SiteAssignment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.assignment_id, a.employee_id, a.site_id, s.name AS site_name,
                       a.start_date, a.end_date, a.wage_rate_per_day, a.wage_rate_per_month
                FROM employee_site_assignments a
                JOIN client_sites s ON s.site_id = a.site_id
                WHERE a.employee_id=%s
                  AND a.start_date <= %s
                  AND (a.end_date IS NULL OR a.end_date >= %s)
                ORDER BY a.assignment_id ASC
                """,
                (int(employee_id), end_date, start_date),
            )
            return [
                SiteAssignment(
                    assignment_id=int(r["assignment_id"]),
                    employee_id=int(r["employee_id"]),
                    site_id=int(r["site_id"]),
                    site_name=r["site_name"],
                    start_date=r["start_date"],
                    end_date=r.get("end_date"),
                    wage_rate_per_day=to_money(r["wage_rate_per_day"]) if r.get("wage_rate_per_day") is not None else None,
                    wage_rate_per_month=to_money(r["wage_rate_per_month"]) if r.get("wage_rate_per_month") is not None else None,
                )
                for r in fetchall(cur)
            ]

    def list_active_employee_ids(self) -> Sequence[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, MIN(assignment_id) AS first_id
                FROM employee_site_assignments
                WHERE end_date IS NULL
                GROUP BY employee_id
                ORDER BY first_id ASC
                """
            )
            return [int(r["employee_id"]) for r in fetchall(cur)]

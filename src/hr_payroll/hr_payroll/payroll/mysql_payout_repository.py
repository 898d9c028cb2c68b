from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

import mysql.connector

from ..common.money import to_money
from ..core.constants import DEFAULT_PAYOUT_LOCK_TIMEOUT
from ..core.enums import PayoutStatus
from ..core.exceptions import PayoutConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import PayoutRecord, PayoutResult
from .repository import PayoutRepository

log = logging.getLogger(__name__)

_COLUMNS = """
    payout_id, employee_id, period, total_days_worked, gross_pay, deductions, net_pay,
    status, generated_date, payout_slip_url
"""


class MySQLPayoutRepository(PayoutRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, lock_timeout: int = DEFAULT_PAYOUT_LOCK_TIMEOUT):
        self._conn_factory = conn_factory
        self._lock_timeout = int(lock_timeout)

    def exists_for_period(self, period: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM payouts WHERE period=%s LIMIT 1", (period,))
            return fetchone(cur) is not None

    def create_many(
        self,
        results: Sequence[PayoutResult],
        *,
        generated_at: datetime,
        guard_period: bool,
    ) -> Sequence[PayoutRecord]:
        periods = sorted({r.period for r in results})
        # Named locks belong to the session, so they are released on this
        # connection only after the inserts are committed or rolled back.
        conn = self._conn_factory.connect()
        cur = conn.cursor(dictionary=True)
        locked: list[str] = []
        try:
            try:
                for period in periods:
                    self._acquire_lock(cur, period)
                    locked.append(period)
                    if guard_period:
                        cur.execute("SELECT 1 AS found FROM payouts WHERE period=%s LIMIT 1", (period,))
                        if fetchone(cur) is not None:
                            raise PayoutConflictError.for_period(period)

                created = [self._insert(cur, r, generated_at) for r in results]
                conn.commit()
            except Exception:
                conn.rollback()
                raise
            return created
        finally:
            for period in locked:
                cur.execute("SELECT RELEASE_LOCK(%s) AS released", (_lock_name(period),))
                fetchone(cur)
            cur.close()
            conn.close()

    def _insert(self, cur, r: PayoutResult, generated_at: datetime) -> PayoutRecord:
        try:
            cur.execute(
                """
                INSERT INTO payouts(employee_id, period, total_days_worked, gross_pay,
                                    deductions, net_pay, status, generated_date)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(r.employee_id),
                    r.period,
                    int(r.total_days_worked),
                    r.gross_pay,
                    r.deductions,
                    r.net_pay,
                    PayoutStatus.GENERATED.value,
                    generated_at,
                ),
            )
        except mysql.connector.IntegrityError as e:
            raise PayoutConflictError(
                f"Payout already generated for employee {r.employee_id} in period {r.period}."
            ) from e
        return PayoutRecord(
            payout_id=int(cur.lastrowid),
            employee_id=int(r.employee_id),
            period=r.period,
            total_days_worked=int(r.total_days_worked),
            gross_pay=r.gross_pay,
            deductions=r.deductions,
            net_pay=r.net_pay,
            status=PayoutStatus.GENERATED,
            generated_date=generated_at,
        )

    def _acquire_lock(self, cur, period: str) -> None:
        cur.execute("SELECT GET_LOCK(%s, %s) AS acquired", (_lock_name(period), self._lock_timeout))
        row = fetchone(cur)
        if not row or int(row.get("acquired") or 0) != 1:
            log.warning("could not lock payouts for period=%s within %ss", period, self._lock_timeout)
            raise PayoutConflictError(f"Payouts for period {period} are being generated by another request.")

    def get_by_id(self, payout_id: int) -> Optional[PayoutRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payouts WHERE payout_id=%s", (int(payout_id),))
            r = fetchone(cur)
            return self._to_record(r) if r else None

    def list_history(self, *, employee_id: Optional[int] = None) -> Sequence[PayoutRecord]:
        clauses = []
        params: list[object] = []
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM payouts {where} ORDER BY period DESC, payout_id ASC",
                tuple(params),
            )
            return [self._to_record(r) for r in fetchall(cur)]

    def set_slip_url(self, payout_id: int, url: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE payouts SET payout_slip_url=%s WHERE payout_id=%s", (url, int(payout_id)))
            return cur.rowcount > 0

    def mark_paid(self, payout_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE payouts SET status=%s WHERE payout_id=%s AND status=%s",
                (PayoutStatus.PAID.value, int(payout_id), PayoutStatus.GENERATED.value),
            )
            return cur.rowcount > 0

    def delete_for_period(self, period: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM payouts WHERE period=%s", (period,))
            return int(cur.rowcount)

    @staticmethod
    def _to_record(r: dict) -> PayoutRecord:
        return PayoutRecord(
            payout_id=int(r["payout_id"]),
            employee_id=int(r["employee_id"]),
            period=r["period"],
            total_days_worked=int(r["total_days_worked"]),
            gross_pay=to_money(r["gross_pay"]),
            deductions=to_money(r["deductions"]),
            net_pay=to_money(r["net_pay"]),
            status=PayoutStatus(r["status"]),
            generated_date=r["generated_date"],
            payout_slip_url=r.get("payout_slip_url"),
        )


def _lock_name(period: str) -> str:
    return f"hr_payroll.payouts.{period}"

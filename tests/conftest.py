from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta
from decimal import Decimal
from pathlib import Path
from typing import Iterable, Optional

import pytest

from src.hr_payroll.hr_payroll.assignments.model import SiteAssignment
from src.hr_payroll.hr_payroll.attendance.model import AttendanceRecord
from src.hr_payroll.hr_payroll.core.enums import AttendanceStatus, PayoutStatus, Role
from src.hr_payroll.hr_payroll.core.exceptions import PayoutConflictError
from src.hr_payroll.hr_payroll.payroll.model import PayoutRecord
from src.hr_payroll.hr_payroll.users.model import Employee


@dataclass
class InMemoryAttendance:
    records: list[AttendanceRecord] = field(default_factory=list)
    calls: int = 0

    def add_days(
        self,
        employee_id: int,
        start: date,
        count: int,
        *,
        status: AttendanceStatus = AttendanceStatus.APPROVED,
    ) -> None:
        for i in range(count):
            day = start + timedelta(days=i)
            self.records.append(
                AttendanceRecord(
                    attendance_id=len(self.records) + 1,
                    employee_id=employee_id,
                    work_date=day,
                    check_in_time=datetime(day.year, day.month, day.day, 8, 0),
                    check_out_time=datetime(day.year, day.month, day.day, 17, 0),
                    status=status,
                    selfie_url=f"/uploads/selfie_{employee_id}_{day.isoformat()}.jpg",
                )
            )

    def list_for_employee(self, *, employee_id, start_date, end_date, status=AttendanceStatus.APPROVED):
        self.calls += 1
        rows = [
            r
            for r in self.records
            if r.employee_id == employee_id and start_date <= r.work_date <= end_date and r.status == status
        ]
        return sorted(rows, key=lambda r: r.work_date)


@dataclass
class InMemoryAssignments:
    assignments: list[SiteAssignment] = field(default_factory=list)

    def add(
        self,
        employee_id: int,
        *,
        start: date,
        end: Optional[date] = None,
        per_day=None,
        per_month=None,
        site_name: str = "Main Site",
    ) -> SiteAssignment:
        a = SiteAssignment(
            assignment_id=len(self.assignments) + 1,
            employee_id=employee_id,
            site_id=len(self.assignments) + 100,
            site_name=site_name,
            start_date=start,
            end_date=end,
            wage_rate_per_day=Decimal(str(per_day)) if per_day is not None else None,
            wage_rate_per_month=Decimal(str(per_month)) if per_month is not None else None,
        )
        self.assignments.append(a)
        return a

    def list_overlapping(self, *, employee_id, start_date, end_date):
        return [
            a
            for a in self.assignments
            if a.employee_id == employee_id
            and a.start_date <= end_date
            and (a.end_date is None or a.end_date >= start_date)
        ]

    def list_active_employee_ids(self):
        seen: list[int] = []
        for a in self.assignments:
            if a.end_date is None and a.employee_id not in seen:
                seen.append(a.employee_id)
        return seen


@dataclass
class InMemoryPayouts:
    records: dict[int, PayoutRecord] = field(default_factory=dict)
    next_id: int = 1

    def exists_for_period(self, period):
        return any(r.period == period for r in self.records.values())

    def create_many(self, results, *, generated_at, guard_period):
        for period in {r.period for r in results}:
            if guard_period and self.exists_for_period(period):
                raise PayoutConflictError.for_period(period)
        taken = {(r.employee_id, r.period) for r in self.records.values()}
        for r in results:
            if (r.employee_id, r.period) in taken:
                raise PayoutConflictError(f"Payout already generated for employee {r.employee_id}")

        created = []
        for r in results:
            record = PayoutRecord(
                payout_id=self.next_id,
                employee_id=r.employee_id,
                period=r.period,
                total_days_worked=r.total_days_worked,
                gross_pay=r.gross_pay,
                deductions=r.deductions,
                net_pay=r.net_pay,
                status=PayoutStatus.GENERATED,
                generated_date=generated_at,
            )
            self.records[record.payout_id] = record
            self.next_id += 1
            created.append(record)
        return created

    def get_by_id(self, payout_id):
        return self.records.get(int(payout_id))

    def list_history(self, *, employee_id=None):
        rows = [r for r in self.records.values() if employee_id is None or r.employee_id == employee_id]
        rows.sort(key=lambda r: r.payout_id)
        rows.sort(key=lambda r: r.period, reverse=True)
        return rows

    def set_slip_url(self, payout_id, url):
        record = self.records.get(int(payout_id))
        if not record:
            return False
        self.records[record.payout_id] = replace(record, payout_slip_url=url)
        return True

    def mark_paid(self, payout_id):
        record = self.records.get(int(payout_id))
        if not record or record.status != PayoutStatus.GENERATED:
            return False
        self.records[record.payout_id] = replace(record, status=PayoutStatus.PAID)
        return True

    def delete_for_period(self, period):
        ids = [pid for pid, r in self.records.items() if r.period == period]
        for pid in ids:
            del self.records[pid]
        return len(ids)


@dataclass
class InMemoryUsers:
    employees: dict[int, Employee] = field(default_factory=dict)

    def add(self, user_id: int, email: str, *, role: Role = Role.EMPLOYEE, full_name: Optional[str] = None) -> Employee:
        emp = Employee(user_id=user_id, email=email, role=role, full_name=full_name)
        self.employees[user_id] = emp
        return emp

    def get_by_id(self, user_id):
        return self.employees.get(int(user_id))

    def get_many(self, user_ids: Iterable[int]):
        return {i: self.employees[i] for i in user_ids if i in self.employees}


class FakeSlipRenderer:
    def __init__(self):
        self.rendered: list[tuple[PayoutRecord, Employee]] = []

    def render(self, record, employee):
        self.rendered.append((record, employee))
        return Path(f"/tmp/payslip_{record.payout_id}.pdf")

    def url_for(self, path):
        return f"/payslips/{Path(path).name}"


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def assignments_repo():
    return InMemoryAssignments()


@pytest.fixture
def payouts_repo():
    return InMemoryPayouts()


@pytest.fixture
def users_repo():
    return InMemoryUsers()


@pytest.fixture
def slip_renderer():
    return FakeSlipRenderer()

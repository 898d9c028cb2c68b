from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .assignments.mysql_assignment_repository import MySQLAssignmentRepository
from .assignments.repository import AssignmentRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .core.constants import DEFAULT_PAYOUT_LOCK_TIMEOUT
from .database.connection import DBConfig, DatabaseConnection
from .payroll.calculator.standard_calculator import StandardPayoutCalculator
from .payroll.mysql_payout_repository import MySQLPayoutRepository
from .payroll.repository import PayoutRepository
from .payroll.service import PayoutService
from .payroll.slips import PdfSlipRenderer, SlipRenderer
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    assignments_repo: AssignmentRepository
    users_repo: UserRepository
    payouts_repo: PayoutRepository

    payout_calculator: StandardPayoutCalculator
    payout_service: PayoutService

    conn: Optional[DatabaseConnection] = None


def build_services(
    *,
    attendance_repo: AttendanceRepository,
    assignments_repo: AssignmentRepository,
    users_repo: UserRepository,
    payouts_repo: PayoutRepository,
    slip_renderer: Optional[SlipRenderer] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of any repository implementations (MySQL or in-memory)."""
    payout_calculator = StandardPayoutCalculator(attendance_repo, assignments_repo)
    payout_service = PayoutService(payouts_repo, payout_calculator, users_repo, slip_renderer=slip_renderer)

    return Container(
        attendance_repo=attendance_repo,
        assignments_repo=assignments_repo,
        users_repo=users_repo,
        payouts_repo=payouts_repo,
        payout_calculator=payout_calculator,
        payout_service=payout_service,
        conn=conn,
    )


def build_container(
    *,
    db_config: dict,
    payslip_dir: str = "payslips",
    payslip_url_prefix: str = "/payslips",
    payout_lock_timeout: int = DEFAULT_PAYOUT_LOCK_TIMEOUT,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        attendance_repo=MySQLAttendanceRepository(conn),
        assignments_repo=MySQLAssignmentRepository(conn),
        users_repo=MySQLUserRepository(conn),
        payouts_repo=MySQLPayoutRepository(conn, lock_timeout=payout_lock_timeout),
        slip_renderer=PdfSlipRenderer(payslip_dir, url_prefix=payslip_url_prefix),
        conn=conn,
    )

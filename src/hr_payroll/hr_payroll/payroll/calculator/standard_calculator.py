from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional

from ...assignments.repository import AssignmentRepository
from ...attendance.repository import AttendanceRepository
from ...common.money import round_money, to_money
from ...common.periods import Period
from ...core.constants import (
    DEDUCTION_PERCENTAGE,
    DEDUCTION_RATE,
    NO_ASSIGNMENT_MESSAGE,
    NO_ATTENDANCE_MESSAGE,
    NO_WAGE_RATE_MESSAGE,
)
from ...core.enums import AttendanceStatus
from ..factory import WageStrategyFactory
from ..model import PayoutResult
from .base import PayoutCalculator

log = logging.getLogger(__name__)

_ZERO = Decimal("0.00")


class StandardPayoutCalculator(PayoutCalculator):
    """Standard rule: approved days x primary assignment wage, minus a flat 5%.

    Missing attendance, assignment or wage rate is not an error: the result is
    zero-valued and ``details["message"]`` says why.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        assignments: AssignmentRepository,
        *,
        strategy_factory: Optional[WageStrategyFactory] = None,
    ):
        self._attendance = attendance
        self._assignments = assignments
        self._factory = strategy_factory or WageStrategyFactory()

    def calculate_payout(self, employee_id: int, period: str) -> PayoutResult:
        p = Period.parse(period)

        records = self._attendance.list_for_employee(
            employee_id=employee_id,
            start_date=p.start,
            end_date=p.end,
            status=AttendanceStatus.APPROVED,
        )
        if not records:
            log.debug("employee=%s period=%s: no approved attendance", employee_id, p.key)
            return self._zero(employee_id, p, 0, {"message": NO_ATTENDANCE_MESSAGE})

        total_days_worked = len(records)

        assignments = self._assignments.list_overlapping(employee_id=employee_id, start_date=p.start, end_date=p.end)
        if not assignments:
            log.debug("employee=%s period=%s: no site assignment", employee_id, p.key)
            return self._zero(
                employee_id,
                p,
                total_days_worked,
                {"message": NO_ASSIGNMENT_MESSAGE, "days_worked": total_days_worked},
            )

        # First assignment in store order pays for the whole period.
        primary = assignments[0]
        if len(assignments) > 1:
            log.warning(
                "employee=%s period=%s: %d overlapping assignments, paying against assignment %s only",
                employee_id,
                p.key,
                len(assignments),
                primary.assignment_id,
            )

        strategy = self._factory.for_assignment(primary)
        if strategy is None:
            log.debug("employee=%s period=%s: no wage rate on assignment %s", employee_id, p.key, primary.assignment_id)
            return self._zero(
                employee_id,
                p,
                total_days_worked,
                {"message": NO_WAGE_RATE_MESSAGE, "days_worked": total_days_worked},
            )

        gross_pay = round_money(
            strategy.gross_pay(assignment=primary, days_worked=total_days_worked, days_in_month=p.days_in_month)
        )
        deductions = round_money(gross_pay * DEDUCTION_RATE)
        net_pay = round_money(gross_pay - deductions)

        return PayoutResult(
            employee_id=employee_id,
            period=p.key,
            total_days_worked=total_days_worked,
            gross_pay=gross_pay,
            deductions=deductions,
            net_pay=net_pay,
            details={
                "wage_source": strategy.source.value,
                "days_in_month": p.days_in_month,
                "attendance_records": total_days_worked,
                "site_name": primary.site_name,
                "wage_rate_per_day": to_money(primary.wage_rate_per_day),
                "wage_rate_per_month": to_money(primary.wage_rate_per_month),
                "deduction_percentage": DEDUCTION_PERCENTAGE,
            },
        )

    def calculate_payouts_for_period(self, period: str) -> List[PayoutResult]:
        p = Period.parse(period)
        payouts: List[PayoutResult] = []
        candidates = self._assignments.list_active_employee_ids()
        for employee_id in candidates:
            payout = self.calculate_payout(employee_id, p.key)
            if payout.total_days_worked > 0:
                payouts.append(payout)

        log.info("period=%s: %d of %d active employees have payable days", p.key, len(payouts), len(candidates))
        return payouts

    @staticmethod
    def _zero(employee_id: int, p: Period, days: int, details: dict) -> PayoutResult:
        return PayoutResult(
            employee_id=employee_id,
            period=p.key,
            total_days_worked=days,
            gross_pay=_ZERO,
            deductions=_ZERO,
            net_pay=_ZERO,
            details=details,
        )

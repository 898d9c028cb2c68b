from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.periods import Period
from ..core.enums import PayoutStatus, Role
from ..core.exceptions import (
    AuthorizationError,
    NotFoundError,
    NothingToGenerateError,
    PayoutConflictError,
    ValidationError,
)
from ..users.repository import UserRepository
from .calculator.base import PayoutCalculator
from .model import PayoutHistoryItem, PayoutRecord, PayoutResult
from .repository import PayoutRepository
from .slips import SlipRenderer

log = logging.getLogger(__name__)

_PAYROLL_ROLES = {Role.ADMIN, Role.MANAGER}


class PayoutService:
    def __init__(
        self,
        payouts: PayoutRepository,
        calculator: PayoutCalculator,
        users: UserRepository,
        *,
        slip_renderer: Optional[SlipRenderer] = None,
    ):
        self._payouts = payouts
        self._calculator = calculator
        self._users = users
        self._slips = slip_renderer

    def generate_payouts(
        self,
        *,
        period: str,
        employee_id: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> Sequence[PayoutRecord]:
        """Compute and persist payouts for a period.

        A period-wide run is refused once the period has any payout; naming an
        employee skips that check so late payouts can still be added.
        """
        p = Period.parse(period)
        scope = f"employee={employee_id}" if employee_id is not None else "all"

        if employee_id is None and self._payouts.exists_for_period(p.key):
            log.warning("period=%s: refusing regeneration, payouts already exist", p.key)
            raise PayoutConflictError.for_period(p.key)

        results: List[PayoutResult]
        if employee_id is not None:
            calculation = self._calculator.calculate_payout(int(employee_id), p.key)
            results = [calculation] if calculation.total_days_worked > 0 else []
        else:
            results = self._calculator.calculate_payouts_for_period(p.key)

        if not results:
            log.warning("period=%s scope=%s: nothing to generate", p.key, scope)
            raise NothingToGenerateError("No payouts to generate. No approved attendance found for this period.")

        created = self._payouts.create_many(
            results,
            generated_at=now or now_local(),
            guard_period=employee_id is None,
        )
        log.info("period=%s scope=%s: generated %d payouts", p.key, scope, len(created))
        return created

    def list_history(self, *, current_user_id: int, current_role: Role) -> List[PayoutHistoryItem]:
        # Employees only ever see their own payouts.
        employee_filter = None if current_role in _PAYROLL_ROLES else int(current_user_id)
        records = self._payouts.list_history(employee_id=employee_filter)

        employees = self._users.get_many({r.employee_id for r in records})
        items = []
        for r in records:
            emp = employees.get(r.employee_id)
            items.append(
                PayoutHistoryItem(
                    record=r,
                    employee_name=emp.display_name if emp else None,
                    employee_email=emp.email if emp else None,
                )
            )
        return items

    def get_slip_url(self, *, payout_id: int, current_user_id: int, current_role: Role) -> str:
        record = self._payouts.get_by_id(int(payout_id))
        if not record:
            raise NotFoundError("Payout not found")
        if record.employee_id != int(current_user_id) and current_role != Role.ADMIN:
            raise AuthorizationError("Not authorized to access this payout")

        if record.payout_slip_url:
            return record.payout_slip_url

        if self._slips is None:
            raise ValidationError("Payslip rendering is not configured")

        employee = self._users.get_by_id(record.employee_id)
        if not employee:
            raise NotFoundError("Employee not found for this payout")

        path = self._slips.render(record, employee)
        url = self._slips.url_for(path)
        self._payouts.set_slip_url(record.payout_id, url)
        log.info("payout=%s: rendered payslip %s", record.payout_id, url)
        return url

    def mark_paid(self, *, payout_id: int) -> PayoutRecord:
        record = self._payouts.get_by_id(int(payout_id))
        if not record:
            raise NotFoundError("Payout not found")
        if record.status == PayoutStatus.PAID:
            raise ValidationError("Payout is already marked as paid")
        if not self._payouts.mark_paid(record.payout_id):
            raise ValidationError("Marking payout as paid failed")
        return self._payouts.get_by_id(record.payout_id) or record

    def delete_for_period(self, *, period: str) -> int:
        p = Period.parse(period)
        deleted = self._payouts.delete_for_period(p.key)
        log.info("period=%s: deleted %d payouts", p.key, deleted)
        return deleted

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import PayoutRecord, PayoutResult


class PayoutRepository(Protocol):
    def exists_for_period(self, period: str) -> bool:
        raise NotImplementedError

    def create_many(
        self,
        results: Sequence[PayoutResult],
        *,
        generated_at: datetime,
        guard_period: bool,
    ) -> Sequence[PayoutRecord]:
        """Insert all results as one unit.

        With ``guard_period`` the "period already has payouts" check runs inside
        the same unit and raises PayoutConflictError. A second payout for the
        same (employee, period) also raises PayoutConflictError.
        """

        raise NotImplementedError

    def get_by_id(self, payout_id: int) -> Optional[PayoutRecord]:
        raise NotImplementedError

    def list_history(self, *, employee_id: Optional[int] = None) -> Sequence[PayoutRecord]:
        """Newest period first."""

        raise NotImplementedError

    def set_slip_url(self, payout_id: int, url: str) -> bool:
        raise NotImplementedError

    def mark_paid(self, payout_id: int) -> bool:
        """Flip ``generated`` to ``paid``; False when not found or already paid."""

        raise NotImplementedError

    def delete_for_period(self, period: str) -> int:
        raise NotImplementedError

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ..model import PayoutResult


class PayoutCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate_payout(self, employee_id: int, period: str) -> PayoutResult:
        raise NotImplementedError

    @abstractmethod
    def calculate_payouts_for_period(self, period: str) -> List[PayoutResult]:
        raise NotImplementedError

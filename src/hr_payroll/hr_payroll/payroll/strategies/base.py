from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ...assignments.model import SiteAssignment
from ...core.enums import WageSource


class WageStrategy(ABC):
    """Strategy Pattern: how an assignment's wage turns into unrounded gross pay."""

    source: WageSource

    @abstractmethod
    def gross_pay(self, *, assignment: SiteAssignment, days_worked: int, days_in_month: int) -> Decimal:
        raise NotImplementedError

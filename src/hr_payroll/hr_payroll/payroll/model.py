from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from ..core.enums import PayoutStatus


@dataclass(frozen=True)
class PayoutResult:
    """Computed pay for one employee and one period (not yet persisted).

    ``details`` is informational (wage source, site, deduction percentage or a
    data-gap ``message``) and never feeds back into computation.
    """

    employee_id: int
    period: str
    total_days_worked: int
    gross_pay: Decimal
    deductions: Decimal
    net_pay: Decimal
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def message(self) -> Optional[str]:
        return self.details.get("message")


@dataclass(frozen=True)
class PayoutRecord:
    """Persisted payout. Only the slip URL and the status change after creation."""

    payout_id: int
    employee_id: int
    period: str
    total_days_worked: int
    gross_pay: Decimal
    deductions: Decimal
    net_pay: Decimal
    status: PayoutStatus
    generated_date: datetime
    payout_slip_url: Optional[str] = None


@dataclass(frozen=True)
class PayoutHistoryItem:
    record: PayoutRecord
    employee_name: Optional[str] = None
    employee_email: Optional[str] = None

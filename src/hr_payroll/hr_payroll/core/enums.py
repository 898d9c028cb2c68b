from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization."""

    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Manager approval state of an attendance record."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PayoutStatus(str, Enum):
    GENERATED = "generated"
    PAID = "paid"


class WageSource(str, Enum):
    """Which wage rate of an assignment produced the gross pay."""

    MONTHLY = "monthly"
    DAILY = "daily"

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: a user account joined with its employee profile.

    Note: Plain data object, no DB access code here.
    """

    user_id: int
    email: str
    role: Role
    full_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.full_name or self.email

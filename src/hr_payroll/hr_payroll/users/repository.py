from __future__ import annotations

from typing import Iterable, Mapping, Optional, Protocol

from .model import Employee


class UserRepository(Protocol):
    """Read access to employees; services depend on this, not on MySQL."""

    def get_by_id(self, user_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_many(self, user_ids: Iterable[int]) -> Mapping[int, Employee]:
        raise NotImplementedError

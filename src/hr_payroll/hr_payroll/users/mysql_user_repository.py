from __future__ import annotations

from typing import Iterable, Mapping, Optional

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import UserRepository

_SELECT = """
    SELECT u.user_id, u.email, u.role, p.name AS full_name
    FROM users u
    LEFT JOIN employee_profiles p ON p.user_id = u.user_id
"""


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE u.user_id=%s", (int(user_id),))
            r = fetchone(cur)
            return self._to_employee(r) if r else None

    def get_many(self, user_ids: Iterable[int]) -> Mapping[int, Employee]:
        ids = sorted({int(i) for i in user_ids})
        if not ids:
            return {}
        placeholders = ", ".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + f" WHERE u.user_id IN ({placeholders})", tuple(ids))
            return {int(r["user_id"]): self._to_employee(r) for r in fetchall(cur)}

    @staticmethod
    def _to_employee(r: dict) -> Employee:
        return Employee(
            user_id=int(r["user_id"]),
            email=r["email"],
            role=Role(r["role"]),
            full_name=r.get("full_name"),
        )

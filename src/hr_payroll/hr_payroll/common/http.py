from __future__ import annotations

from typing import Any, Optional

from flask import jsonify


def ok(data: Any = None, status: int = 200, **extra):
    payload = {"success": True}
    payload.update(extra)
    if data is not None:
        payload["data"] = data
    return jsonify(payload), status


def fail(message: str = "Bad Request", status: int = 400, code: Optional[str] = None):
    err = {"message": message}
    if code:
        err["code"] = code
    return jsonify({"success": False, "error": err}), status

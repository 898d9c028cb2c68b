from __future__ import annotations

from flask import Flask
from werkzeug.exceptions import HTTPException

from ..core.exceptions import DomainError
from .http import fail


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        return fail(str(e), status=e.status_code, code=e.code)

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return fail(e.description or e.name, status=e.code or 500)

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        app.logger.exception(e)
        return fail("Internal server error", status=500)

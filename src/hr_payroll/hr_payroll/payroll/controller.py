from __future__ import annotations

from functools import wraps

from flask import Flask, request, session

from ..common.http import ok
from ..common.money import money_to_float
from ..common.validators import optional_positive_int, require_period
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from ..container import Container
from .model import PayoutHistoryItem, PayoutRecord

API_PREFIX = "/api/v1/payouts"


def serialize_payout(record: PayoutRecord) -> dict:
    return {
        "id": record.payout_id,
        "employeeId": record.employee_id,
        "period": record.period,
        "totalDaysWorked": record.total_days_worked,
        "grossPay": money_to_float(record.gross_pay),
        "deductions": money_to_float(record.deductions),
        "netPay": money_to_float(record.net_pay),
        "status": record.status.value,
        "generatedDate": record.generated_date.isoformat(),
        "payoutSlipUrl": record.payout_slip_url,
    }


def serialize_history_item(item: PayoutHistoryItem) -> dict:
    data = serialize_payout(item.record)
    data["employee"] = {
        "id": item.record.employee_id,
        "email": item.employee_email,
        "name": item.employee_name,
    }
    return data


def register(app: Flask, container: Container) -> None:
    def current_user() -> tuple[int, Role]:
        if "user_id" not in session:
            raise AuthenticationError("Not authorized to access this route")
        try:
            return int(session["user_id"]), Role(session.get("role"))
        except ValueError:
            raise AuthenticationError("Not authorized to access this route")

    def roles_required(*roles: Role):
        def decorator(view):
            @wraps(view)
            def wrapper(*args, **kwargs):
                _, role = current_user()
                if role not in roles:
                    raise AuthorizationError(f"User role {role.value} is not authorized to access this route")
                return view(*args, **kwargs)

            return wrapper

        return decorator

    @app.route(f"{API_PREFIX}/generate", methods=["POST"], endpoint="generate_payouts")
    @roles_required(Role.ADMIN, Role.MANAGER)
    def generate_payouts():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")

        period = require_period(body.get("period"))
        employee_id = optional_positive_int(body.get("employeeId"), "employeeId")

        created = container.payout_service.generate_payouts(period=period.key, employee_id=employee_id)
        return ok([serialize_payout(r) for r in created], status=201, count=len(created))

    @app.route(f"{API_PREFIX}/history", methods=["GET"], endpoint="payout_history")
    def payout_history():
        user_id, role = current_user()
        items = container.payout_service.list_history(current_user_id=user_id, current_role=role)
        return ok([serialize_history_item(i) for i in items], count=len(items))

    @app.route(f"{API_PREFIX}/<int:payout_id>/slip", methods=["GET"], endpoint="payout_slip")
    def payout_slip(payout_id: int):
        user_id, role = current_user()
        url = container.payout_service.get_slip_url(payout_id=payout_id, current_user_id=user_id, current_role=role)
        return ok({"url": url})

    @app.route(f"{API_PREFIX}/<int:payout_id>/paid", methods=["PATCH"], endpoint="mark_payout_paid")
    @roles_required(Role.ADMIN)
    def mark_payout_paid(payout_id: int):
        record = container.payout_service.mark_paid(payout_id=payout_id)
        return ok(serialize_payout(record))

    @app.route(API_PREFIX, methods=["DELETE"], endpoint="delete_period_payouts")
    @roles_required(Role.ADMIN)
    def delete_period_payouts():
        period = require_period(request.args.get("period"))
        deleted = container.payout_service.delete_for_period(period=period.key)
        return ok(count=deleted)

class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400
    code = "DOMAIN_ERROR"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "VALIDATION_ERROR"


class AuthenticationError(DomainError):
    """Raised when the request carries no signed-in user."""

    status_code = 401
    code = "AUTHENTICATION_ERROR"


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    status_code = 403
    code = "AUTHORIZATION_ERROR"


class NotFoundError(DomainError):
    status_code = 404
    code = "NOT_FOUND"


class PayoutConflictError(DomainError):
    """Raised when payouts were already generated for the requested period."""

    code = "PAYOUT_CONFLICT"

    @classmethod
    def for_period(cls, period: str) -> "PayoutConflictError":
        return cls(
            f"Payouts already generated for period {period}. "
            "Delete existing payouts first or specify an employeeId."
        )


class NothingToGenerateError(DomainError):
    """Raised when no employee has payable attendance in the period."""

    status_code = 404
    code = "NOTHING_TO_GENERATE"

# app/services/errors.py
"""
Typed workflow errors.

Every error maps to one HTTP status code. Services raise these; the
exception handler in app.main converts them to JSON responses so route
handlers stay free of business logic. Messages never echo entity data.
"""


class WorkflowError(Exception):
    """Base class for all workflow errors."""

    status_code: int = 500

    def __init__(self, detail: str = "Internal error"):
        self.detail = detail
        super().__init__(detail)


class Unauthenticated(WorkflowError):
    """No access token supplied (401)."""

    status_code = 401

    def __init__(self, detail: str = "Missing access token"):
        super().__init__(detail)


class InvalidToken(WorkflowError):
    """Access token does not resolve to a user (401)."""

    status_code = 401

    def __init__(self, detail: str = "Invalid access token"):
        super().__init__(detail)


class InvalidCredentials(WorkflowError):
    """Login mismatch: same message whether the username exists or not (401)."""

    status_code = 401

    def __init__(self, detail: str = "Invalid credentials"):
        super().__init__(detail)


class Forbidden(WorkflowError):
    """Caller's role is not allowed for the operation (403)."""

    status_code = 403

    def __init__(self, detail: str = "Insufficient role permissions"):
        super().__init__(detail)


class NotFound(WorkflowError):
    """Referenced entity missing, or owned by another driver (404)."""

    status_code = 404


class InvalidTransition(WorkflowError):
    """Entity is not in a state that allows the requested action (409)."""

    status_code = 409


class ValidationError(WorkflowError):
    """Required input missing (400)."""

    status_code = 400

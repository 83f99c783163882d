"""
Domain exceptions - Semantic error types for speaker registration.

Every failure of a registration attempt carries one of a closed set of
kinds, so callers can branch on ``error.kind`` instead of the class.
None of these are retried.
"""

from enum import Enum


class RegistrationErrorKind(str, Enum):
    """Closed set of registration failure kinds."""

    MISSING_FIELD = "missing_field"
    NO_SESSIONS = "no_sessions"
    NOT_ELIGIBLE = "not_eligible"
    NO_APPROVED_SESSIONS = "no_approved_sessions"


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    kind: RegistrationErrorKind


class MissingFieldError(RegistrationError):
    """A required identity field is blank."""

    kind = RegistrationErrorKind.MISSING_FIELD

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} is required")
        self.field = field


class NoSessionsError(RegistrationError):
    """Speaker has no sessions to present."""

    kind = RegistrationErrorKind.NO_SESSIONS

    def __init__(self) -> None:
        super().__init__("Can't register speaker with no sessions to present")


class NotEligibleError(RegistrationError):
    """Speaker fails both the credential bar and the domain/browser rule."""

    kind = RegistrationErrorKind.NOT_ELIGIBLE

    def __init__(self) -> None:
        super().__init__("Speaker doesn't meet our standards")


class NoApprovedSessionsError(RegistrationError):
    """Every session was rejected by the content filter."""

    kind = RegistrationErrorKind.NO_APPROVED_SESSIONS

    def __init__(self) -> None:
        super().__init__("No sessions approved")

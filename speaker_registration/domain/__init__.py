"""
Domain layer - Pure business logic with zero framework imports.

This package contains the speaker registration rules: structural
validation, eligibility, session content filtering and fee calculation.
It defines its own port interfaces for infrastructure abstraction.
"""

from .exceptions import (
    MissingFieldError,
    NoApprovedSessionsError,
    NoSessionsError,
    NotEligibleError,
    RegistrationError,
    RegistrationErrorKind,
)
from .models import Session, Speaker
from .policy import DEFAULT_POLICY, FeeTier, RegistrationPolicy
from .ports import BrowserName, SpeakerRepository, WebBrowser
from .registration import RegistrationEvaluator

__all__ = [
    "DEFAULT_POLICY",
    "BrowserName",
    "FeeTier",
    "MissingFieldError",
    "NoApprovedSessionsError",
    "NoSessionsError",
    "NotEligibleError",
    "RegistrationError",
    "RegistrationErrorKind",
    "RegistrationEvaluator",
    "RegistrationPolicy",
    "Session",
    "Speaker",
    "SpeakerRepository",
    "WebBrowser",
]

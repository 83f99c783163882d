"""
Registration domain service - Speaker evaluation pipeline.

This module contains the core business logic for speaker registration:
an ordered sequence of rules applied to a Speaker aggregate.

Pipeline (fixed order, first failure aborts the rest)
=====================================================

1. Structural validation  - first name, last name, email, sessions
2. Eligibility            - credential bar OR NOT restricted domain/browser
3. Session content filter - reject sessions mentioning legacy technology
4. Fee calculation        - tiered lookup on years of experience
5. Persistence            - repository.save_speaker()

Validation failures are raised to the caller. A persistence failure is
logged and absorbed: register() returns None, exactly as if the speaker
had not been persisted yet.
"""

import logging
from dataclasses import dataclass, field

from .exceptions import (
    MissingFieldError,
    NoApprovedSessionsError,
    NoSessionsError,
    NotEligibleError,
)
from .models import Speaker
from .policy import DEFAULT_POLICY, RegistrationPolicy
from .ports import BrowserName, SpeakerRepository

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass
class RegistrationEvaluator:
    """
    Domain service for speaker registration.

    Orchestrates validation, eligibility, session approval, fee
    calculation and persistence for one speaker at a time. Holds no
    per-speaker state, so one instance may serve many attempts.
    """

    repository: SpeakerRepository
    policy: RegistrationPolicy = field(default=DEFAULT_POLICY)

    def register(self, speaker: Speaker) -> int | None:
        """
        Evaluate a speaker and persist them if every rule passes.

        Args:
            speaker: Speaker aggregate populated by the caller

        Returns:
            Identifier assigned by the repository, or None if saving failed

        Raises:
            MissingFieldError: First name, last name or email is blank
            NoSessionsError: Speaker has no sessions
            NotEligibleError: Speaker fails the eligibility rule
            NoApprovedSessionsError: Every session was rejected
        """
        self.validate_registration(speaker)
        self.calculate_fee(speaker)
        return self._save_speaker(speaker)

    def validate_registration(self, speaker: Speaker) -> None:
        """Run structural validation, eligibility and the content filter."""
        self.validate_structure(speaker)
        if not self.is_eligible(speaker):
            logger.info("Speaker %s rejected: not eligible", speaker.email)
            raise NotEligibleError()
        self.approve_sessions(speaker)

    def validate_structure(self, speaker: Speaker) -> None:
        """
        Check required fields in a fixed order.

        First name, last name and email are checked before the session
        list, so the reported error is deterministic.
        """
        if _is_blank(speaker.first_name):
            raise MissingFieldError("first_name")
        if _is_blank(speaker.last_name):
            raise MissingFieldError("last_name")
        if _is_blank(speaker.email):
            raise MissingFieldError("email")
        if not speaker.sessions:
            raise NoSessionsError()

    def is_eligible(self, speaker: Speaker) -> bool:
        return self.meets_experience_or_credential_bar(
            speaker
        ) or not self.is_restricted_domain_or_legacy_browser(speaker)

    def meets_experience_or_credential_bar(self, speaker: Speaker) -> bool:
        years = speaker.years_experience
        if years is not None and years > self.policy.experience_threshold:
            return True
        if speaker.has_blog:
            return True
        if len(speaker.certifications or ()) > self.policy.certification_threshold:
            return True
        return self.is_allowed_employer(speaker)

    def is_allowed_employer(self, speaker: Speaker) -> bool:
        return speaker.employer in self.policy.allowed_employers

    def is_restricted_domain_or_legacy_browser(self, speaker: Speaker) -> bool:
        return self.is_restricted_domain(speaker) or self.is_legacy_browser(speaker)

    def is_restricted_domain(self, speaker: Speaker) -> bool:
        """Email domain is everything after the last '@'."""
        domain = (speaker.email or "").rsplit("@", 1)[-1]
        return domain in self.policy.blocked_domains

    def is_legacy_browser(self, speaker: Speaker) -> bool:
        browser = speaker.browser
        if browser is None:
            return False
        return (
            browser.name == BrowserName.INTERNET_EXPLORER
            and browser.major_version < self.policy.legacy_browser_version
        )

    def approve_sessions(self, speaker: Speaker) -> None:
        """
        Set each session's approved flag from the legacy keyword list.

        Keywords are scanned in order. A keyword found in the title or
        description rejects the session and ends its scan; a keyword not
        found approves the session and the scan moves on. With an empty
        keyword list the flags keep their current value.

        Raises:
            NoApprovedSessionsError: No session ended approved
        """
        for session in speaker.sessions:
            for keyword in self.policy.legacy_keywords:
                if keyword in session.title or keyword in session.description:
                    session.approved = False
                    logger.info("Session %r rejected: mentions %s", session.title, keyword)
                    break
                session.approved = True

        if not any(session.approved for session in speaker.sessions):
            raise NoApprovedSessionsError()

    def calculate_fee(self, speaker: Speaker) -> None:
        """Set the fee from the first matching experience tier, else 0."""
        speaker.registration_fee = 0
        for tier in self.policy.fee_tiers:
            if tier.matches(speaker.years_experience):
                speaker.registration_fee = tier.fee
                break

    def _save_speaker(self, speaker: Speaker) -> int | None:
        # Storage failures are reported here and never reach the caller.
        try:
            return self.repository.save_speaker(speaker)
        except Exception:
            logger.exception("Failed to save speaker %s", speaker.email)
            return None

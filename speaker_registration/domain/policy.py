"""
Registration rule tables.

Fixed domain policy: the employer allow-list, blocked email domains,
legacy technology keywords and the fee tiers. Instances are frozen and
hold tuples only, so a single policy can be shared between evaluators.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FeeTier:
    """Inclusive experience range and the fee it carries."""

    minimum_years: int
    maximum_years: int
    fee: int

    def matches(self, years: int | None) -> bool:
        if years is None:
            return False
        return self.minimum_years <= years <= self.maximum_years


@dataclass(frozen=True)
class RegistrationPolicy:
    """Read-only rule tables consumed by RegistrationEvaluator."""

    allowed_employers: tuple[str, ...] = (
        "Microsoft",
        "Google",
        "Fog Creek Software",
        "37Signals",
    )
    # Exact, case-sensitive match: "compuserve.com" is not blocked.
    blocked_domains: tuple[str, ...] = (
        "aol.com",
        "hotmail.com",
        "prodigy.com",
        "CompuServe.com",
    )
    legacy_keywords: tuple[str, ...] = ("Cobol", "Punch Cards", "Commodore", "VBScript")
    fee_tiers: tuple[FeeTier, ...] = (
        FeeTier(0, 1, 500),
        FeeTier(2, 3, 250),
        FeeTier(4, 5, 100),
        FeeTier(6, 9, 50),
    )
    experience_threshold: int = 10
    certification_threshold: int = 3
    legacy_browser_version: int = 9


DEFAULT_POLICY = RegistrationPolicy()

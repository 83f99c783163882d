"""Speaker aggregate and its sessions."""

from dataclasses import dataclass, field

from .ports import WebBrowser


@dataclass
class Session:
    """A talk a speaker proposes to present."""

    title: str
    description: str = ""
    approved: bool = False


@dataclass
class Speaker:
    """
    Aggregate root for a speaker registration.

    Built by the caller with every field populated, passed once through
    the evaluator, then handed to the repository. ``registration_fee``
    stays 0 until the fee calculation runs.
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    years_experience: int | None = None
    has_blog: bool = False
    blog_url: str | None = None
    employer: str | None = None
    certifications: list[str] = field(default_factory=list)
    browser: WebBrowser | None = None
    sessions: list[Session] = field(default_factory=list)
    registration_fee: int = 0

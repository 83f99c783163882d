"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Identity fields default to blank so that required-field checks are made
by the domain layer and reported with its error types.
"""

from pydantic import BaseModel, Field

from speaker_registration.domain.models import Session, Speaker
from speaker_registration.domain.ports import BrowserName, WebBrowser


class SessionRequest(BaseModel):
    """A proposed session."""

    title: str
    description: str = ""


class BrowserRequest(BaseModel):
    """Browser the speaker registered from."""

    name: str = Field("Unknown", description="Browser name, e.g. 'Internet Explorer', 'Chrome'")
    major_version: int = Field(0, ge=0)

    def to_domain(self) -> WebBrowser:
        return WebBrowser(name=BrowserName.from_string(self.name), major_version=self.major_version)


class RegisterSpeakerRequest(BaseModel):
    """Request model for speaker registration."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    years_experience: int | None = None
    has_blog: bool = False
    blog_url: str | None = None
    employer: str | None = None
    certifications: list[str] = Field(default_factory=list)
    browser: BrowserRequest | None = None
    sessions: list[SessionRequest] = Field(default_factory=list)

    def to_domain(self) -> Speaker:
        """Build the Speaker aggregate evaluated by the domain service."""
        return Speaker(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            years_experience=self.years_experience,
            has_blog=self.has_blog,
            blog_url=self.blog_url,
            employer=self.employer,
            certifications=list(self.certifications),
            browser=self.browser.to_domain() if self.browser is not None else None,
            sessions=[Session(title=s.title, description=s.description) for s in self.sessions],
        )


class SessionResult(BaseModel):
    """Outcome of the content filter for one session."""

    title: str
    approved: bool


class RegisterSpeakerResponse(BaseModel):
    """Response model for an accepted registration."""

    speaker_id: int | None = Field(
        ..., description="Assigned id, or null if the speaker could not be saved yet"
    )
    registration_fee: int
    sessions: list[SessionResult]

    @classmethod
    def from_domain(cls, speaker_id: int | None, speaker: Speaker) -> "RegisterSpeakerResponse":
        return cls(
            speaker_id=speaker_id,
            registration_fee=speaker.registration_fee,
            sessions=[SessionResult(title=s.title, approved=s.approved) for s in speaker.sessions],
        )


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str

"""
Unit tests for API request/response models.

Tests Pydantic model validation and conversion to/from the domain.
"""

import pytest
from pydantic import ValidationError

from speaker_registration.api.models import (
    BrowserRequest,
    ErrorResponse,
    RegisterSpeakerRequest,
    RegisterSpeakerResponse,
)
from speaker_registration.domain.models import Session, Speaker
from speaker_registration.domain.ports import BrowserName, WebBrowser


class TestRegisterSpeakerRequest:
    """Tests for RegisterSpeakerRequest model."""

    def test_empty_body_accepted(self) -> None:
        """Required-field checks are left to the domain."""
        request = RegisterSpeakerRequest()
        assert request.first_name == ""
        assert request.sessions == []

    def test_to_domain_copies_fields(self) -> None:
        request = RegisterSpeakerRequest(
            first_name="Ada",
            last_name="Lovelace",
            email="ada@example.com",
            years_experience=4,
            has_blog=True,
            blog_url="https://ada.example.com",
            employer="Google",
            certifications=["A", "B"],
            browser={"name": "Internet Explorer", "major_version": 8},
            sessions=[{"title": "Modern Web APIs", "description": "REST"}],
        )

        speaker = request.to_domain()

        assert isinstance(speaker, Speaker)
        assert speaker.first_name == "Ada"
        assert speaker.years_experience == 4
        assert speaker.has_blog is True
        assert speaker.employer == "Google"
        assert speaker.certifications == ["A", "B"]
        assert speaker.browser == WebBrowser(BrowserName.INTERNET_EXPLORER, 8)
        assert speaker.sessions == [Session("Modern Web APIs", "REST", approved=False)]
        assert speaker.registration_fee == 0

    def test_missing_browser_maps_to_none(self) -> None:
        assert RegisterSpeakerRequest(first_name="Ada").to_domain().browser is None

    def test_session_requires_title(self) -> None:
        with pytest.raises(ValidationError):
            RegisterSpeakerRequest(sessions=[{"description": "no title"}])

    def test_years_must_be_integer(self) -> None:
        with pytest.raises(ValidationError):
            RegisterSpeakerRequest(years_experience="many")


class TestBrowserRequest:
    """Tests for BrowserRequest model."""

    def test_unknown_name(self) -> None:
        assert BrowserRequest(name="Netscape").to_domain().name is BrowserName.UNKNOWN

    def test_negative_version_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BrowserRequest(name="Chrome", major_version=-1)


class TestRegisterSpeakerResponse:
    """Tests for RegisterSpeakerResponse model."""

    def test_from_domain(self) -> None:
        speaker = Speaker(
            registration_fee=100,
            sessions=[Session("Go", approved=True), Session("Cobol", approved=False)],
        )

        response = RegisterSpeakerResponse.from_domain(5, speaker)

        assert response.model_dump() == {
            "speaker_id": 5,
            "registration_fee": 100,
            "sessions": [
                {"title": "Go", "approved": True},
                {"title": "Cobol", "approved": False},
            ],
        }

    def test_null_speaker_id_allowed(self) -> None:
        response = RegisterSpeakerResponse.from_domain(None, Speaker())
        assert response.speaker_id is None


class TestErrorResponse:
    """Tests for ErrorResponse model."""

    def test_detail(self) -> None:
        assert ErrorResponse(detail="No sessions approved").detail == "No sessions approved"

"""
Shared test fixtures and configuration.

This module provides:
- A speaker factory with valid defaults that individual tests override
- Repository doubles for the persistence port
"""

from collections.abc import Callable
from typing import Any
from unittest.mock import Mock

import pytest

from speaker_registration.domain.models import Session, Speaker
from speaker_registration.domain.ports import BrowserName, WebBrowser


def build_speaker(**overrides: Any) -> Speaker:
    """
    Build a Speaker that passes every rule unless overridden.

    Defaults: blogging speaker with 5 years' experience, a Chrome browser
    and one modern session.
    """
    fields: dict[str, Any] = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "years_experience": 5,
        "has_blog": True,
        "blog_url": "https://ada.example.com",
        "employer": "Analytical Engines Ltd",
        "certifications": [],
        "browser": WebBrowser(BrowserName.CHROME, 120),
        "sessions": [Session("Modern Web APIs", "REST, GraphQL and friends")],
    }
    fields.update(overrides)
    return Speaker(**fields)


@pytest.fixture
def make_speaker() -> Callable[..., Speaker]:
    """Factory fixture for speakers with valid defaults."""
    return build_speaker


@pytest.fixture
def repository() -> Mock:
    """Repository double that assigns id 42."""
    repo = Mock()
    repo.save_speaker.return_value = 42
    return repo

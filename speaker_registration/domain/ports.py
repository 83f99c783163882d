"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure, plus the browser descriptor the eligibility rule
reads. Adapters implement these protocols.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import Speaker


class BrowserName(str, Enum):
    """Browsers a speaker may submit their registration from."""

    UNKNOWN = "Unknown"
    INTERNET_EXPLORER = "InternetExplorer"
    FIREFOX = "Firefox"
    CHROME = "Chrome"
    OPERA = "Opera"
    SAFARI = "Safari"
    DOLPHIN = "Dolphin"
    KONQUEROR = "Konqueror"
    LINX = "Linx"

    @classmethod
    def from_string(cls, name: str | None) -> BrowserName:
        """
        Translate a free-text browser name to a BrowserName.

        Matching ignores case, spaces and dashes. Common aliases for
        Internet Explorer ("IE", "MSIE") are recognised. Anything else
        maps to UNKNOWN.
        """
        if not name:
            return cls.UNKNOWN

        key = name.replace(" ", "").replace("-", "").lower()
        if key in _BROWSER_ALIASES:
            return _BROWSER_ALIASES[key]
        for member in cls:
            if member.value.lower() == key:
                return member
        return cls.UNKNOWN


_BROWSER_ALIASES = {
    "ie": BrowserName.INTERNET_EXPLORER,
    "msie": BrowserName.INTERNET_EXPLORER,
    "googlechrome": BrowserName.CHROME,
    "mozillafirefox": BrowserName.FIREFOX,
    "lynx": BrowserName.LINX,
}


@dataclass(frozen=True)
class WebBrowser:
    """Browser descriptor: name plus numeric major version."""

    name: BrowserName = BrowserName.UNKNOWN
    major_version: int = 0


class SpeakerRepository(Protocol):
    """Port interface for speaker persistence."""

    def save_speaker(self, speaker: Speaker) -> int:
        """
        Persist a fully evaluated speaker and their sessions.

        Args:
            speaker: Speaker with fee computed and session approval finalized

        Returns:
            Newly assigned speaker identifier

        Raises:
            Exception: Any storage-layer failure
        """
        ...

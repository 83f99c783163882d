"""
In-memory repository adapter - Implements SpeakerRepository protocol.

Keeps saved speakers in a dict for demo/development runs and tests.
Nothing survives a restart.
"""

import copy
import itertools
import logging
import threading

from speaker_registration.domain.models import Speaker

logger = logging.getLogger(__name__)


class InMemorySpeakerRepository:
    """
    Implements SpeakerRepository protocol with a process-local dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Ids are assigned sequentially starting at 1.
    """

    def __init__(self) -> None:
        self._speakers: dict[int, Speaker] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def save_speaker(self, speaker: Speaker) -> int:
        # Stored as a copy so later caller mutations don't leak in.
        with self._lock:
            speaker_id = next(self._ids)
            self._speakers[speaker_id] = copy.deepcopy(speaker)

        logger.info("[MEMORY] Saved speaker %s with id %s", speaker.email, speaker_id)
        return speaker_id

    def get(self, speaker_id: int) -> Speaker | None:
        """Return the stored speaker, or None if the id is unknown."""
        with self._lock:
            return self._speakers.get(speaker_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._speakers)

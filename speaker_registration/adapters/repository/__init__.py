"""Repository adapters - Database and in-memory implementations."""

from .memory import InMemorySpeakerRepository
from .postgres import PostgresSpeakerRepository, run_migrations

__all__ = ["InMemorySpeakerRepository", "PostgresSpeakerRepository", "run_migrations"]

"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request

from speaker_registration.domain.ports import SpeakerRepository
from speaker_registration.domain.registration import RegistrationEvaluator


def get_repository(request: Request) -> SpeakerRepository:
    """
    Get the speaker repository from app state.

    The repository is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.repository


def get_registration_evaluator(request: Request) -> RegistrationEvaluator:
    """Create the registration evaluator wired to the app's repository."""
    return RegistrationEvaluator(repository=get_repository(request))

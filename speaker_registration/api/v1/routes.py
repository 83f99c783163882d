"""
API v1 routes.

Defines REST endpoints for the Speaker Registration API.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from speaker_registration.api.dependencies import get_registration_evaluator
from speaker_registration.api.models import (
    ErrorResponse,
    RegisterSpeakerRequest,
    RegisterSpeakerResponse,
)
from speaker_registration.domain.exceptions import (
    MissingFieldError,
    NoApprovedSessionsError,
    NoSessionsError,
    NotEligibleError,
)
from speaker_registration.domain.registration import RegistrationEvaluator

router = APIRouter(tags=["v1"])


@router.post(
    "/speakers",
    response_model=RegisterSpeakerResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        202: {
            "model": RegisterSpeakerResponse,
            "description": "Speaker accepted but not saved yet (speaker_id is null)",
        },
        403: {"model": ErrorResponse, "description": "Speaker or sessions rejected"},
        422: {"model": ErrorResponse, "description": "Missing required data"},
    },
    summary="Register a speaker",
    description="Submit speaker and session details. The speaker is checked against "
    "the eligibility rules, each session against the content policy, and the "
    "registration fee is computed from years of experience.",
)
async def register_speaker(
    request_data: RegisterSpeakerRequest,
    response: Response,
    evaluator: RegistrationEvaluator = Depends(get_registration_evaluator),
) -> RegisterSpeakerResponse:
    """
    Register a speaker and their sessions.

    - **first_name**, **last_name**, **email**: required
    - **sessions**: at least one, and at least one must pass the content policy

    Returns the assigned id, the registration fee and per-session approval.
    """
    speaker = request_data.to_domain()
    try:
        speaker_id = evaluator.register(speaker)
    except (MissingFieldError, NoSessionsError) as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        ) from None
    except (NotEligibleError, NoApprovedSessionsError) as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        ) from None

    if speaker_id is None:
        response.status_code = status.HTTP_202_ACCEPTED
    return RegisterSpeakerResponse.from_domain(speaker_id, speaker)

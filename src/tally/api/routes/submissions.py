"""Submissions API endpoint.

POST /api/respostas - Submit a group's survey answers
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from tally.api.app import get_db_session
from tally.db.repo import DbSession
from tally.errors import StorageError, ValidationError
from tally.ingest.submissions import SubmissionInput, submit_responses
from tally.models.types import SubmissionCreatedResponse, SubmissionPayload

router = APIRouter()


@router.post("/respostas", response_model=SubmissionCreatedResponse, status_code=201)
def create_submission(
    payload: SubmissionPayload,
    session: DbSession = Depends(get_db_session),
) -> SubmissionCreatedResponse:
    """Store a survey submission and refresh the dominant snapshot.

    Args:
        payload: Submission data (grupo, tema1, tema2, tema3).
        session: Database session (injected).

    Returns:
        SubmissionCreatedResponse with the new submission ID.

    Raises:
        HTTPException: 400 if the submission is invalid, 500 if it
            could not be stored.
    """
    submission_input = SubmissionInput(
        group=payload.grupo,
        topic1=payload.tema1,
        topic2=payload.tema2,
        topic3=payload.tema3,
    )

    try:
        result = submit_responses(session=session, submission_input=submission_input)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    return SubmissionCreatedResponse(
        submission_id=result.submission_id,
        message="responses saved",
    )

"""Summary API endpoint.

GET /api/medias - Get the latest dominant answer per question
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from tally.aggregation.summary import get_latest_summary
from tally.api.app import get_db_session
from tally.db.repo import DbSession
from tally.errors import NotFoundError, StorageError
from tally.models.types import DominantSummary

router = APIRouter()


@router.get("/medias", response_model=DominantSummary)
def get_summary(session: DbSession = Depends(get_db_session)) -> DominantSummary:
    """Get the dominant-value snapshot of the latest submission.

    Raises:
        HTTPException: 404 if no summary exists yet, 500 on storage failure.
    """
    try:
        snapshot = get_latest_summary(session)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    return DominantSummary(medias=snapshot)

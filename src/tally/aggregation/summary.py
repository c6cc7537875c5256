"""Latest dominant-value summary.

The summary is the snapshot stored with the most recent submission.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from tally.db import repo
from tally.db.repo import DbSession
from tally.errors import NotFoundError, StorageError
from tally.models.domain import DominantSnapshot, is_empty_snapshot

logger = logging.getLogger(__name__)


def get_latest_summary(session: DbSession) -> DominantSnapshot:
    """Return the dominant snapshot of the latest submission.

    Args:
        session: Database session.

    Returns:
        The stored snapshot, verbatim.

    Raises:
        NotFoundError: If there are no submissions, or the latest one
            still carries the empty default snapshot.
        StorageError: If the store cannot be read.
    """
    try:
        latest = repo.get_latest_submission(session)
    except SQLAlchemyError as e:
        logger.exception("Failed to read latest submission")
        raise StorageError("error reading summary") from e

    if latest is None or is_empty_snapshot(latest.dominant_snapshot):
        raise NotFoundError("no summary available")

    return latest.dominant_snapshot

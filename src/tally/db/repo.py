"""Repository pattern for the response store.

Encapsulates all SQLAlchemy queries, keeping domain logic pure.
Returns domain models (not SQLAlchemy entities) to external callers.

The store is append-only: there are no update or delete operations.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from sqlalchemy import func
from sqlalchemy.orm import Session

from tally.db.schema import Submission
from tally.models.domain import SubmissionEntity

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["DbSession"]


# ============================================================================
# Converters: SQLAlchemy <-> Domain
# ============================================================================


def _submission_to_entity(row: Submission) -> SubmissionEntity:
    """Convert SQLAlchemy Submission to domain entity."""
    return SubmissionEntity(
        submission_id=row.submission_id,
        group=row.group_name,
        topic1=json.loads(row.topic1_json),
        topic2=json.loads(row.topic2_json),
        topic3=json.loads(row.topic3_json),
        dominant_snapshot=json.loads(row.dominant_json),
        created_at=row.created_at,
    )


def _entity_to_submission(entity: SubmissionEntity) -> Submission:
    """Convert domain entity to a new SQLAlchemy Submission row."""
    return Submission(
        group_name=entity.group,
        topic1_json=json.dumps(entity.topic1),
        topic2_json=json.dumps(entity.topic2),
        topic3_json=json.dumps(entity.topic3),
        dominant_json=json.dumps(entity.dominant_snapshot),
    )


# ============================================================================
# Submission Repository
# ============================================================================


def create_submission(session: DbSession, entity: SubmissionEntity) -> SubmissionEntity:
    """Append a submission.

    Flushes so the assigned submission_id and created_at are available
    before commit. Returns the entity with those fields filled in.
    """
    row = _entity_to_submission(entity)
    session.add(row)
    session.flush()
    return _submission_to_entity(row)


def get_all_submissions(session: DbSession) -> list[SubmissionEntity]:
    """Get every stored submission in insertion order."""
    rows = session.query(Submission).order_by(Submission.submission_id).all()
    return [_submission_to_entity(r) for r in rows]


def get_latest_submission(session: DbSession) -> SubmissionEntity | None:
    """Get the most recently appended submission."""
    row = session.query(Submission).order_by(Submission.submission_id.desc()).first()
    return _submission_to_entity(row) if row else None


def count_submissions(session: DbSession) -> int:
    """Count stored submissions."""
    return session.query(func.count(Submission.submission_id)).scalar() or 0


# ============================================================================
# Batch Operations
# ============================================================================


def commit(session: DbSession) -> None:
    """Commit current transaction."""
    session.commit()


def rollback(session: DbSession) -> None:
    """Roll back current transaction."""
    session.rollback()

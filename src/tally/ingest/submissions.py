"""Submission ingestion.

Validates a submission, recomputes the dominant snapshot over the full
history plus the new submission, and appends it to the store.
Domain logic is pure - database operations go through repo.

Reading the history and appending are not atomic across concurrent
ingestions; a snapshot may miss a submission written in between.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError

from tally.aggregation.dominant import compute_snapshot
from tally.db import repo
from tally.db.repo import DbSession
from tally.errors import StorageError, ValidationError
from tally.models.domain import (
    MAX_ANSWER,
    MIN_ANSWER,
    TOPICS,
    DominantSnapshot,
    SubmissionEntity,
)

logger = logging.getLogger(__name__)


@dataclass
class SubmissionInput:
    """Input for submission ingestion."""

    group: str | None
    topic1: list[int]
    topic2: list[int]
    topic3: list[int]


@dataclass
class SubmissionResult:
    """Result of submission ingestion."""

    submission_id: int
    dominant_snapshot: DominantSnapshot
    success: bool


def validate_submission(submission_input: SubmissionInput) -> None:
    """Check a submission before it reaches aggregation.

    Checks run in order and stop at the first failure:
    group present, answer counts, answer range.

    Raises:
        ValidationError: With a message describing the first failure.
    """
    if not submission_input.group or not submission_input.group.strip():
        raise ValidationError("group required")

    for topic_key, question_count in TOPICS:
        answers = getattr(submission_input, topic_key)
        if len(answers) != question_count:
            raise ValidationError(
                f"wrong answer count: {topic_key} must have {question_count} answers, "
                f"got {len(answers)}"
            )

    for topic_key, _ in TOPICS:
        answers = getattr(submission_input, topic_key)
        out_of_range = [a for a in answers if not MIN_ANSWER <= a <= MAX_ANSWER]
        if out_of_range:
            raise ValidationError(
                f"answers out of range: {topic_key} values must be between "
                f"{MIN_ANSWER} and {MAX_ANSWER}, got {out_of_range}"
            )


def submit_responses(
    session: DbSession,
    submission_input: SubmissionInput,
) -> SubmissionResult:
    """Validate, aggregate and store a submission.

    Args:
        session: Database session.
        submission_input: Submission data.

    Returns:
        SubmissionResult with the new submission ID and its snapshot.

    Raises:
        ValidationError: If the submission is malformed. Nothing is read
            or written in that case.
        StorageError: If the store cannot be read or written.
    """
    validate_submission(submission_input)

    submission = _create_submission_entity(submission_input)

    try:
        history = repo.get_all_submissions(session)
        submission.dominant_snapshot = compute_snapshot([*history, submission])

        stored = repo.create_submission(session, submission)
        repo.commit(session)
    except SQLAlchemyError as e:
        repo.rollback(session)
        logger.exception("Failed to save submission for group %r", submission.group)
        raise StorageError("error saving responses") from e

    logger.info(
        "Stored submission %s for group %r (history size %d)",
        stored.submission_id,
        stored.group,
        len(history) + 1,
    )

    return SubmissionResult(
        submission_id=stored.submission_id,
        dominant_snapshot=stored.dominant_snapshot,
        success=True,
    )


def _create_submission_entity(submission_input: SubmissionInput) -> SubmissionEntity:
    """Create submission entity from validated input.

    Pure function - no database access.
    """
    return SubmissionEntity(
        group=submission_input.group.strip(),
        topic1=list(submission_input.topic1),
        topic2=list(submission_input.topic2),
        topic3=list(submission_input.topic3),
    )

"""Domain models for Tally.

Pure Python dataclasses representing domain entities.
These models are independent of SQLAlchemy and used throughout
the application for clean separation from the database layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

# ============================================================================
# Topic Registry
# ============================================================================

TopicKey = Literal["topic1", "topic2", "topic3"]

# Topic order is the order of the snapshot sequences
TOPICS: tuple[tuple[TopicKey, int], ...] = (
    ("topic1", 7),
    ("topic2", 7),
    ("topic3", 8),
)

MIN_ANSWER = 1
MAX_ANSWER = 10

# One sequence per topic; None marks a position with no dominant value yet
DominantSnapshot = list[list[int | None]]


def empty_snapshot() -> DominantSnapshot:
    """Return the default snapshot: one empty sequence per topic."""
    return [[] for _ in TOPICS]


def is_empty_snapshot(snapshot: DominantSnapshot) -> bool:
    """Check whether a snapshot is the all-empty default."""
    return all(len(values) == 0 for values in snapshot)


# ============================================================================
# Submission Domain
# ============================================================================


@dataclass
class SubmissionEntity:
    """Domain model for a survey submission.

    The snapshot is computed once, before the submission is stored,
    and never recomputed afterwards.
    """

    group: str
    topic1: list[int]
    topic2: list[int]
    topic3: list[int]
    dominant_snapshot: DominantSnapshot = field(default_factory=empty_snapshot)
    submission_id: int | None = None
    created_at: datetime | None = None

    def answers(self, topic_key: TopicKey) -> list[int]:
        """Get the answer vector for a topic."""
        return getattr(self, topic_key)

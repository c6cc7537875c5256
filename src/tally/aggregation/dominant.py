"""Dominant-value aggregation over survey submissions.

For every question position of a topic, the dominant value is the answer
with the highest occurrence count across the submissions considered.
Ties go to the value seen first, in submission order.

Pure computation - no database access.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from tally.models.domain import TOPICS, DominantSnapshot, SubmissionEntity, TopicKey


class DominantTally:
    """Running per-position frequency table for one topic.

    Feeding every submission through add() and calling dominant() gives
    the same result as a full rescan with compute_dominant().
    """

    def __init__(self, topic_key: TopicKey, question_count: int) -> None:
        self.topic_key = topic_key
        self.question_count = question_count
        # Counter keeps first-seen order, which the tie-break relies on
        self._counts: list[Counter[int]] = [Counter() for _ in range(question_count)]

    def add(self, submission: SubmissionEntity) -> None:
        """Count one submission's answers for this topic."""
        answers = submission.answers(self.topic_key)
        for index, value in enumerate(answers[: self.question_count]):
            self._counts[index][value] += 1

    def max_count(self, index: int) -> int:
        """Highest tally at a question position (0 if nothing counted)."""
        counts = self._counts[index]
        return max(counts.values()) if counts else 0

    def dominant(self) -> list[int | None]:
        """Dominant value per position; None where nothing was counted."""
        return [_most_common(counts) for counts in self._counts]


def _most_common(counts: Counter[int]) -> int | None:
    if not counts:
        return None
    # most_common orders equal counts by first insertion
    value, _ = counts.most_common(1)[0]
    return value


def compute_dominant(
    submissions: Iterable[SubmissionEntity],
    topic_key: TopicKey,
    question_count: int,
) -> list[int | None]:
    """Compute the dominant value for each question of a topic.

    The caller includes the submission being written in `submissions`,
    so the result reflects history inclusive of that record.

    Args:
        submissions: Full submission history, in submission order.
        topic_key: Which topic's answers to tally.
        question_count: Number of question positions in the topic.

    Returns:
        List of length question_count. Positions with no answers are None.
    """
    tally = DominantTally(topic_key, question_count)
    for submission in submissions:
        tally.add(submission)
    return tally.dominant()


def compute_snapshot(submissions: Iterable[SubmissionEntity]) -> DominantSnapshot:
    """Compute the dominant values of every topic, in topic order."""
    history = list(submissions)
    return [
        compute_dominant(history, topic_key, question_count)
        for topic_key, question_count in TOPICS
    ]

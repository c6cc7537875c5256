"""Tests for domain and API models."""

import pytest
from pydantic import ValidationError

from tally.models.domain import (
    TOPICS,
    SubmissionEntity,
    empty_snapshot,
    is_empty_snapshot,
)
from tally.models.types import DominantSummary, SubmissionPayload


class TestTopics:
    """Topic registry."""

    def test_topic_order_and_counts(self):
        """Topics are 7, 7 and 8 questions, in order."""
        assert TOPICS == (("topic1", 7), ("topic2", 7), ("topic3", 8))


class TestSnapshotHelpers:
    """Default snapshot handling."""

    def test_empty_snapshot(self):
        """Default snapshot is three empty lists."""
        assert empty_snapshot() == [[], [], []]

    def test_empty_snapshots_are_independent(self):
        """Each default is a fresh object."""
        first = empty_snapshot()
        first[0].append(1)

        assert empty_snapshot() == [[], [], []]

    def test_is_empty_snapshot(self):
        """Only the all-empty snapshot counts as empty."""
        assert is_empty_snapshot([[], [], []])
        assert not is_empty_snapshot([[None] * 7, [None] * 7, [None] * 8])
        assert not is_empty_snapshot([[1] * 7, [], []])


class TestSubmissionEntity:
    """Submission domain model."""

    def test_defaults(self):
        """New submissions have no ID and an empty snapshot."""
        entity = SubmissionEntity(group="g", topic1=[1] * 7, topic2=[2] * 7, topic3=[3] * 8)

        assert entity.submission_id is None
        assert entity.dominant_snapshot == [[], [], []]

    def test_answers_by_topic(self):
        """answers() returns the vector for a topic key."""
        entity = SubmissionEntity(group="g", topic1=[1] * 7, topic2=[2] * 7, topic3=[3] * 8)

        assert entity.answers("topic2") == [2] * 7
        assert entity.answers("topic3") == [3] * 8


class TestSubmissionPayload:
    """Wire model for POST /api/respostas."""

    def test_parses_wire_fields(self):
        """Portuguese field names map onto the payload."""
        payload = SubmissionPayload(grupo="g", tema1=[1] * 7, tema2=[2] * 7, tema3=[3] * 8)

        assert payload.grupo == "g"
        assert payload.tema3 == [3] * 8

    def test_missing_fields_default(self):
        """Missing fields default so ingestion can report them."""
        payload = SubmissionPayload()

        assert payload.grupo is None
        assert payload.tema1 == []

    def test_rejects_non_integer_answers(self):
        """Answers must be integers."""
        with pytest.raises(ValidationError):
            SubmissionPayload(grupo="g", tema1=["a"] * 7)

    @pytest.mark.parametrize("value", [True, "5", 5.0])
    def test_rejects_coercible_answers(self, value):
        """Answers are not coerced from booleans, strings or floats."""
        with pytest.raises(ValidationError):
            SubmissionPayload(grupo="g", tema1=[value] * 7)


class TestDominantSummary:
    """Wire model for GET /api/medias."""

    def test_allows_absent_values(self):
        """None marks a position without a dominant value."""
        summary = DominantSummary(medias=[[1, None], [], [None]])

        assert summary.model_dump() == {"medias": [[1, None], [], [None]]}

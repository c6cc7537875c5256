"""Pydantic models for the Tally API.

Field names follow the wire format used by the survey frontend
(grupo, tema1, tema2, tema3, medias).
"""

from pydantic import BaseModel, Field, StrictInt


class SubmissionPayload(BaseModel):
    """Survey submission as posted by the frontend.

    Answers must be JSON integers: booleans, numeric strings and floats
    are rejected here. Lengths and ranges are checked by the ingestion
    flow, so that those rejections carry the ingestion error messages.
    """

    grupo: str | None = None
    tema1: list[StrictInt] = Field(default_factory=list)
    tema2: list[StrictInt] = Field(default_factory=list)
    tema3: list[StrictInt] = Field(default_factory=list)


class SubmissionCreatedResponse(BaseModel):
    """Response for a stored submission."""

    submission_id: int
    message: str


class DominantSummary(BaseModel):
    """Latest dominant value per question, one list per topic."""

    medias: list[list[int | None]]

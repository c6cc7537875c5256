"""Database schema for Tally.

Submissions are append-only. The autoincrement primary key defines
insertion order, which is what "latest submission" means.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Submission(Base):
    """Survey submission with its point-in-time dominant snapshot (append-only).

    Answer vectors and the snapshot are stored as JSON text.
    """

    __tablename__ = "submissions"

    submission_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    group_name: Mapped[str] = mapped_column(String(128), nullable=False)
    topic1_json: Mapped[str] = mapped_column(Text, nullable=False)
    topic2_json: Mapped[str] = mapped_column(Text, nullable=False)
    topic3_json: Mapped[str] = mapped_column(Text, nullable=False)
    dominant_json: Mapped[str] = mapped_column(Text, nullable=False, default="[[], [], []]")
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=lambda: datetime.now(timezone.utc)
    )

"""Database models for noisy students."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from noisy_students.db.postgres.session import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NoisyStudentModel(Base):
    """A student recorded as noisy, newest entries listed first."""

    __tablename__ = "noisy_students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    time_added: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )

    __table_args__ = (
        Index("ix_noisy_students_time_added", "time_added"),
        # Ids are never reused after a delete
        {"sqlite_autoincrement": True},
    )

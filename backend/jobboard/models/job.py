"""
Job Database Model

SQLAlchemy 2.0 model for the job postings that users can save.
Full job documents live in the search index; this table holds the
columns the saved-jobs listing needs.
"""

from typing import Optional
from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime, Boolean, CheckConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from jobboard.core.database import Base

JOB_TYPES = ("full-time", "part-time", "contract", "volunteer", "internship")


class Job(Base):
    """Job posting referenced by saved jobs and search results."""

    __tablename__ = "jobs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    employer_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    employer_logo_url: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)

    # Location
    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    country: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    is_remote: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    job_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    application_deadline: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )

    __table_args__ = (
        CheckConstraint(
            "job_type IN ('full-time', 'part-time', 'contract', 'volunteer', 'internship') "
            "OR job_type IS NULL",
            name='ck_job_job_type_valid'
        ),
        Index('idx_job_is_active', 'is_active'),
    )

    def __repr__(self) -> str:
        """String representation of Job."""
        return f"<Job(id={self.id}, title='{self.title}')>"

    @property
    def is_closed(self) -> bool:
        """True once the application deadline has passed."""
        if not self.application_deadline:
            return False

        deadline = self.application_deadline
        # SQLite hands back naive datetimes; they are stored as UTC
        if deadline.tzinfo is None:
            deadline = deadline.replace(tzinfo=timezone.utc)
        return deadline < datetime.now(timezone.utc)

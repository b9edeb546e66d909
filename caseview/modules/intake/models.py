from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer, DateTime, JSON
from caseview.core.base import Base, TimestampedMixin

# One row per submission; a task can collect several (resubmissions, restarts).
class IntakeForm(Base, TimestampedMixin):
    __tablename__ = "patient_intake_forms"

    patient_id: Mapped[int] = mapped_column(Integer, index=True)
    task_id: Mapped[int] = mapped_column(Integer, index=True)
    form_id: Mapped[str | None] = mapped_column(String(50), nullable=True)
    state: Mapped[str | None] = mapped_column(String(255), nullable=True)
    response: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    last_step: Mapped[str | None] = mapped_column(String(50), nullable=True)
    status: Mapped[str | None] = mapped_column(String(255), nullable=True)
    tag: Mapped[str | None] = mapped_column(String(255), nullable=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

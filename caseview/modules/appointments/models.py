from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, Text, DateTime
from caseview.core.base import Base, TimestampedMixin

class Appointment(Base, TimestampedMixin):
    __tablename__ = "appointments"

    task_id: Mapped[int] = mapped_column(Integer, index=True)
    # denormalized from the task for direct appointment queries
    patient_id: Mapped[int] = mapped_column(Integer)
    doctor_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    start_at: Mapped[datetime] = mapped_column(DateTime)  # UTC
    end_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)  # UTC
    status: Mapped[str | None] = mapped_column(Text, default="scheduled", nullable=True)  # scheduled, confirmed, completed, cancelled, no_show
    link: Mapped[str | None] = mapped_column(Text, nullable=True)

from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Text, Boolean, Float, Integer, DateTime, JSON
from sqlalchemy.dialects.postgresql import ARRAY
from caseview.core.base import Base, TimestampedMixin

class Task(Base, TimestampedMixin):
    __tablename__ = "tasks"

    code: Mapped[str | None] = mapped_column(String(255), nullable=True)
    doctor_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    patient_id: Mapped[int] = mapped_column(Integer, index=True)

    type: Mapped[str] = mapped_column(String(255))  # e.g. Appointment
    tag: Mapped[str] = mapped_column(String(255))   # e.g. New
    state: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(String(255))  # free text, e.g. "Waiting to start"

    start_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    due_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    completed_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    # Payment
    amount: Mapped[float | None] = mapped_column(Float, nullable=True)
    total_amount: Mapped[float | None] = mapped_column(Float, nullable=True)
    payment_status: Mapped[str | None] = mapped_column("payment_Status", String(255), default="Unpaid", nullable=True)

    is_assigned: Mapped[bool | None] = mapped_column(Boolean, default=False, nullable=True)
    requires_appointment: Mapped[bool | None] = mapped_column(Boolean, default=True, nullable=True)

    # Reviews
    provider_is_reviewed: Mapped[bool | None] = mapped_column(Boolean, default=False, nullable=True)
    provider_decline_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    provider_decline_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_reviewed: Mapped[bool | None] = mapped_column(Boolean, default=False, nullable=True)
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    reviewed_by: Mapped[int | None] = mapped_column(Integer, nullable=True)
    admin_decline_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    admin_decline_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Post processing (mailing/packaging)
    requires_post_processing: Mapped[bool | None] = mapped_column(Boolean, default=False, nullable=True)
    completed_post_processing_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    # AI analysis
    ai_medical_analysis_status: Mapped[str | None] = mapped_column(String(255), nullable=True)
    ai_medical_analysis_result: Mapped[str | None] = mapped_column(Text, nullable=True)
    ai_medical_analysis_generated_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    labels: Mapped[list[str] | None] = mapped_column(ARRAY(Text).with_variant(JSON(), "sqlite"), nullable=True)
    tracking_params: Mapped[dict | None] = mapped_column(JSON, nullable=True)

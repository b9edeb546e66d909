from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer, Boolean
from caseview.core.base import Base, TimestampedMixin

class Document(Base, TimestampedMixin):
    __tablename__ = "documents"

    doctor_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    patient_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    task_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)

    name: Mapped[str] = mapped_column(String(255))
    type: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    sub_type: Mapped[str | None] = mapped_column(String(255), nullable=True)  # e.g. "Permanent Permit"
    tag: Mapped[str | None] = mapped_column(String(255), nullable=True)
    url: Mapped[str] = mapped_column(String(255))
    file_type: Mapped[str | None] = mapped_column(String(255), nullable=True)
    patient_visible: Mapped[bool | None] = mapped_column(Boolean, default=True, nullable=True)

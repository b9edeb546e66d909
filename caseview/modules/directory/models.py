from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Boolean, Text
from caseview.core.base import Base, TimestampedMixin

class Doctor(Base, TimestampedMixin):
    __tablename__ = "doctors"
    first_name: Mapped[str] = mapped_column(String(255), index=True)
    middle_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str] = mapped_column(String(255))
    code: Mapped[str | None] = mapped_column(String(255), nullable=True)

    phone_number: Mapped[str | None] = mapped_column(String(255), nullable=True)
    profile_picture: Mapped[str | None] = mapped_column(String(255), nullable=True)
    credentials: Mapped[str | None] = mapped_column(String(255), nullable=True)  # Physician, Nurse Practitioner, ...
    npi_number: Mapped[str | None] = mapped_column(String(255), nullable=True)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)

    city: Mapped[str | None] = mapped_column(String(255), nullable=True)
    state: Mapped[str | None] = mapped_column(String(255), nullable=True)
    country: Mapped[str | None] = mapped_column(String(255), nullable=True)
    timezone: Mapped[str | None] = mapped_column(Text, nullable=True)  # e.g. America/New_York
    is_active: Mapped[bool | None] = mapped_column(Boolean, default=True, nullable=True)

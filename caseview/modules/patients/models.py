from datetime import date
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Date, Boolean, JSON, Text
from sqlalchemy.dialects.postgresql import ARRAY
from caseview.core.base import Base, TimestampedMixin

class Patient(Base, TimestampedMixin):
    __tablename__ = "patients"

    code: Mapped[str | None] = mapped_column(String(255), nullable=True)
    brand_code: Mapped[str | None] = mapped_column(String(255), nullable=True)

    first_name: Mapped[str] = mapped_column(String(255))
    middle_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str] = mapped_column(String(255), index=True)
    phone: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    alternate_phone: Mapped[str | None] = mapped_column(String(255), nullable=True)

    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    apartment: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str | None] = mapped_column(String(255), nullable=True)
    county: Mapped[str | None] = mapped_column(String(255), nullable=True)
    state: Mapped[str | None] = mapped_column(String(255), nullable=True)
    country: Mapped[str | None] = mapped_column(String(255), nullable=True)
    zipcode: Mapped[str | None] = mapped_column(String(255), nullable=True)

    mail_address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    mail_apartment: Mapped[str | None] = mapped_column(String(255), nullable=True)
    mail_city: Mapped[str | None] = mapped_column(String(255), nullable=True)
    mail_state: Mapped[str | None] = mapped_column(String(255), nullable=True)
    mail_county: Mapped[str | None] = mapped_column(String(255), nullable=True)
    mail_country: Mapped[str | None] = mapped_column(String(255), nullable=True)
    mail_zipcode: Mapped[str | None] = mapped_column(String(255), nullable=True)

    dob: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_minor: Mapped[bool | None] = mapped_column(Boolean, default=False, nullable=True)
    gender: Mapped[str | None] = mapped_column(String(255), nullable=True)
    timezone: Mapped[str | None] = mapped_column(String(255), nullable=True)
    driver_license: Mapped[str | None] = mapped_column(String(255), nullable=True)

    labels: Mapped[list[str] | None] = mapped_column(ARRAY(Text).with_variant(JSON(), "sqlite"), nullable=True)
    tracking_params: Mapped[dict | None] = mapped_column(JSON, nullable=True)

from __future__ import annotations
from datetime import date, datetime
from typing import Any, Iterable, Mapping

from pydantic.alias_generators import to_camel
from sqlalchemy import inspect as sa_inspect

from caseview.core.dates import calculate_age, to_iso_string
from caseview.modules.patients.models import Patient as DbPatient
from caseview.modules.tasks.models import Task as DbTask
from caseview.modules.directory.models import Doctor as DbDoctor
from caseview.modules.intake.models import IntakeForm as DbIntakeForm
from caseview.modules.appointments.models import Appointment as DbAppointment
from caseview.modules.documents.classifier import build_document_buckets
from caseview.modules.documents.schemas import DocumentOut
from caseview.modules.case_view.schemas import (
    AdminReview, AppointmentInfo, DoctorInfo, IntakeInfo, PostProcessing,
    ProviderReview, TaskLinks, TaskView,
)

# Output field -> raw keys that have carried it over time, in priority order.
PATIENT_FIELD_FALLBACKS: dict[str, tuple[str, ...]] = {
    "firstName": ("first_name", "firstName", "given_name"),
    "lastName": ("last_name", "lastName", "family_name"),
    "email": ("email", "primary_email"),
    "phone": ("phone", "primary_phone", "phone_number"),
    "city": ("city",),
    "state": ("state",),
}

# Snake-case name keys read by the widget header.
PATIENT_NAME_KEYS: dict[str, str] = {"first_name": "firstName", "last_name": "lastName"}

# -------------------- helpers --------------------
def _coalesce(*values: Any) -> Any:
    for v in values:
        if v is not None:
            return v
    return None

def _columns(obj: Any) -> dict[str, Any]:
    return {attr.key: getattr(obj, attr.key) for attr in sa_inspect(obj).mapper.column_attrs}

def _json_value(v: Any) -> Any:
    if isinstance(v, (datetime, date)):
        return to_iso_string(v)
    return v

def is_valid_id(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)

def distinct_doctor_ids(tasks: Iterable[DbTask]) -> list[int]:
    return list(dict.fromkeys(t.doctor_id for t in tasks if is_valid_id(t.doctor_id)))

def full_name(*parts: str | None) -> str | None:
    present = [p for p in parts if p]
    return " ".join(present) if present else None

# -------------------- Patient --------------------
def normalize_patient(record: Mapping[str, Any], now: datetime | None = None) -> dict[str, Any]:
    view = {to_camel(k): _json_value(v) for k, v in record.items()}
    for field, candidates in PATIENT_FIELD_FALLBACKS.items():
        view[field] = _coalesce(*(record.get(key) for key in candidates))
    for key, field in PATIENT_NAME_KEYS.items():
        view[key] = view[field]
    view["dob"] = to_iso_string(record.get("dob"))
    view["age"] = calculate_age(record.get("dob"), now=now)
    return view

def patient_to_view(p: DbPatient, now: datetime | None = None) -> dict[str, Any]:
    return normalize_patient(_columns(p), now=now)

# -------------------- Task joins --------------------
def doctor_info(d: DbDoctor | None) -> DoctorInfo:
    if d is None:
        return DoctorInfo()
    return DoctorInfo(
        id=d.id,
        first_name=d.first_name,
        middle_name=d.middle_name,
        last_name=d.last_name,
        phone_number=d.phone_number,
        profile_picture=d.profile_picture,
        credentials=d.credentials,
        npi_number=d.npi_number,
        state=d.state,
        city=d.city,
        country=d.country,
        timezone=d.timezone,
        is_active=d.is_active,
    )

def intake_status(i: DbIntakeForm | None) -> str | None:
    if i is None:
        return None
    return _coalesce(i.status, "completed" if i.completed_at else "pending")

def intake_info(i: DbIntakeForm | None) -> IntakeInfo:
    if i is None:
        return IntakeInfo()
    return IntakeInfo(
        status=intake_status(i),
        submitted=True,
        is_completed=bool(i.completed_at),
        last_step=i.last_step,
        tag=i.tag,
        completed_at=to_iso_string(i.completed_at),
        created_at=to_iso_string(i.created_at),
    )

def appointment_info(a: DbAppointment | None) -> AppointmentInfo | None:
    if a is None:
        return None
    return AppointmentInfo(
        start_at=to_iso_string(a.start_at),
        end_at=to_iso_string(a.end_at),
        status=a.status,
        link=a.link,
    )

def is_task_completed(t: DbTask) -> bool:
    return bool(t.completed_date) or (t.status or "").lower() == "completed"

def task_to_view(
    t: DbTask,
    *,
    doctor: DbDoctor | None,
    intake: DbIntakeForm | None,
    appointment: DbAppointment | None,
    documents: Iterable[DocumentOut],
    care_portal_base: str = "",
) -> TaskView:
    return TaskView(
        task_id=t.id,
        code=t.code,
        task_type=t.type,
        task_tag=t.tag,
        doctor_id=t.doctor_id,
        doctor=doctor_info(doctor),
        doctor_name=full_name(*(
            (doctor.first_name, doctor.middle_name, doctor.last_name) if doctor else ()
        )),
        requires_appointment=bool(t.requires_appointment),
        start_date=to_iso_string(t.start_date),
        status=t.status,
        completed=is_task_completed(t),
        payment_status=t.payment_status,
        payment_amount=_coalesce(t.amount, t.total_amount),
        total_amount=t.total_amount,
        provider_reviewed=bool(t.provider_is_reviewed),
        provider_review=ProviderReview(
            is_reviewed=bool(t.provider_is_reviewed),
            decline_reason=t.provider_decline_reason,
            decline_notes=t.provider_decline_notes,
        ),
        admin_review=AdminReview(
            is_reviewed=bool(t.is_reviewed),
            reviewed_at=to_iso_string(t.reviewed_at),
            reviewed_by=t.reviewed_by,
            decline_reason=t.admin_decline_reason,
            decline_notes=t.admin_decline_notes,
        ),
        decline_reason=_coalesce(t.provider_decline_reason, t.admin_decline_reason),
        labels=list(t.labels or []),
        created_at=to_iso_string(t.created_at),
        due_date=to_iso_string(t.due_date),
        is_assigned=bool(t.is_assigned),
        intake_status=intake_status(intake),
        intake=intake_info(intake),
        appointment=appointment_info(appointment),
        appointment_start_time=to_iso_string(appointment.start_at if appointment else None),
        post_processing=PostProcessing(
            required=bool(t.requires_post_processing),
            completed_at=to_iso_string(t.completed_post_processing_at),
        ),
        ai_status=t.ai_medical_analysis_status,
        ai_status_generated_at=to_iso_string(t.ai_medical_analysis_generated_at),
        medical_context=t.ai_medical_analysis_result,
        tracking_params=t.tracking_params,
        links=TaskLinks(
            care_portal_task=f"{care_portal_base}/admin/tasks/{t.id}" if care_portal_base and t.id else None,
        ),
        documents=build_document_buckets(documents),
    )

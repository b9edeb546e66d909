from typing import Any, Literal
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from caseview.modules.documents.schemas import DocumentBuckets

class _Out(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# ---- Task sub-objects ----

class DoctorInfo(_Out):
    id: int | None = None
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    profile_picture: str | None = None
    credentials: str | None = None
    npi_number: str | None = None
    state: str | None = None
    city: str | None = None
    country: str | None = None
    timezone: str | None = None
    is_active: bool | None = None

class ProviderReview(_Out):
    is_reviewed: bool = False
    decline_reason: str | None = None
    decline_notes: str | None = None

class AdminReview(_Out):
    is_reviewed: bool = False
    reviewed_at: str | None = None
    reviewed_by: int | None = None
    decline_reason: str | None = None
    decline_notes: str | None = None

class IntakeInfo(_Out):
    status: str | None = None
    submitted: bool = False
    is_completed: bool = False
    last_step: str | None = None
    tag: str | None = None
    completed_at: str | None = None
    created_at: str | None = None

class AppointmentInfo(_Out):
    start_at: str | None = None
    end_at: str | None = None
    status: str | None = None
    link: str | None = None

class PostProcessing(_Out):
    required: bool = False
    completed_at: str | None = None

class TaskLinks(_Out):
    care_portal_task: str | None = None

class TaskView(_Out):
    task_id: int
    code: str | None = None
    task_type: str | None = None
    task_tag: str | None = None
    doctor_id: int | None = None
    doctor: DoctorInfo
    doctor_name: str | None = Field(default=None, alias="doctor_name")
    requires_appointment: bool = False
    start_date: str | None = None
    status: str | None = None
    completed: bool = False
    payment_status: str | None = None
    payment_amount: float | None = None
    total_amount: float | None = None
    provider_reviewed: bool = False
    provider_review: ProviderReview
    admin_review: AdminReview
    decline_reason: str | None = None
    labels: list[str] = Field(default_factory=list)
    created_at: str | None = None
    due_date: str | None = None
    is_assigned: bool = False
    intake_status: str | None = None
    intake: IntakeInfo
    appointment: AppointmentInfo | None = None
    appointment_start_time: str | None = None
    post_processing: PostProcessing
    ai_status: str | None = None
    ai_status_generated_at: str | None = None
    medical_context: str | None = None
    tracking_params: Any = None
    links: TaskLinks
    documents: DocumentBuckets

# ---- Envelope ----

class PatientPortalLinks(_Out):
    # reserved until the patient portal exposes deep links
    login: None = None
    medical_record: None = None
    drivers_license: None = None
    consent: None = None
    profile: None = None

class CaseLinks(_Out):
    patient_portal: PatientPortalLinks = Field(default_factory=PatientPortalLinks)
    care_portal_patient: str | None = None

class CaseViewData(_Out):
    patient: dict[str, Any]
    tasks: list[TaskView]
    links: CaseLinks

class CaseViewSuccess(_Out):
    success: Literal[True] = True
    data: CaseViewData

class CaseViewFailure(_Out):
    success: Literal[False] = False
    error: str
    status: int | None = None

CaseViewResult = CaseViewSuccess | CaseViewFailure

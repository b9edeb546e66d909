import asyncio
import logging
from datetime import datetime
from typing import Any, Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from caseview.core.utils import DEFAULT_LIMIT, clamp_limit, trim_trailing_slash
from caseview.modules.patients.repository import PatientRepository
from caseview.modules.tasks.repository import TaskRepository
from caseview.modules.directory.repository import DoctorRepository
from caseview.modules.intake.repository import IntakeFormRepository
from caseview.modules.appointments.repository import AppointmentRepository
from caseview.modules.documents.repository import DocumentRepository
from caseview.modules.documents.schemas import DocumentOut
from caseview.modules.case_view.mapping import distinct_doctor_ids, is_valid_id, patient_to_view, task_to_view
from caseview.modules.case_view.schemas import (
    CaseLinks, CaseViewData, CaseViewFailure, CaseViewResult, CaseViewSuccess,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

MISSING_CONTACT = "Email or phone is required to fetch task details"
PATIENT_NOT_FOUND = "Patient not found for the provided criteria"
NO_TASKS = "No tasks found for the given criteria"
UNEXPECTED = "Unexpected server error"


class CaseViewService:
    """Builds the support widget's case view for one patient contact.

    Read-only: every query runs on short-lived sessions from ``session_factory``
    and nothing is committed.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        care_portal_url: str | None = None,
        default_limit: int = DEFAULT_LIMIT,
    ):
        self.session_factory = session_factory
        self.care_portal_base = trim_trailing_slash(care_portal_url)
        self.default_limit = default_limit

    async def fetch_case_view(
        self,
        email: str | None = None,
        phone: str | None = None,
        limit: Any = None,
        now: datetime | None = None,
    ) -> CaseViewResult:
        email = (email or "").strip() or None
        phone = (phone or "").strip() or None
        if not email and not phone:
            return CaseViewFailure(error=MISSING_CONTACT, status=400)

        try:
            return await self._build(email, phone, clamp_limit(limit, self.default_limit), now)
        except Exception:
            logger.exception("Error fetching case view")
            return CaseViewFailure(error=UNEXPECTED, status=500)

    async def _read(self, fn: Callable[[AsyncSession], Awaitable[T]]) -> T:
        # AsyncSession is not safe for concurrent use; each branch gets its own
        async with self.session_factory() as session:
            return await fn(session)

    async def _build(self, email: str | None, phone: str | None, limit: int, now: datetime | None) -> CaseViewResult:
        async with self.session_factory() as session:
            patient = await PatientRepository(session).find_by_contact(email=email, phone=phone)
            if not patient:
                return CaseViewFailure(error=PATIENT_NOT_FOUND, status=404)
            tasks = await TaskRepository(session).list_for_patient(patient.id, limit)
            if not tasks:
                logger.info(f"Patient {patient.id} has no tasks")
                return CaseViewFailure(error=NO_TASKS, status=404)

        task_ids = [t.id for t in tasks]
        doctor_ids = distinct_doctor_ids(tasks)
        logger.debug(f"Loading case view for patient {patient.id}: tasks={task_ids} doctors={doctor_ids}")

        branches = [
            asyncio.create_task(self._read(lambda s: DoctorRepository(s).get_by_ids(doctor_ids))),
            asyncio.create_task(self._read(lambda s: IntakeFormRepository(s).latest_by_task_ids(task_ids))),
            asyncio.create_task(self._read(lambda s: AppointmentRepository(s).latest_by_task_ids(task_ids))),
            asyncio.create_task(self._read(lambda s: DocumentRepository(s).list_for_tasks(task_ids, patient.id, doctor_ids))),
        ]
        try:
            doctors, intakes, appointments, documents = await asyncio.gather(*branches)
        except BaseException:
            # first failure wins; release the sibling sessions before reporting it
            for b in branches:
                b.cancel()
            await asyncio.gather(*branches, return_exceptions=True)
            raise

        docs_by_task = group_documents_by_task(documents, fallback_task_id=task_ids[0] if task_ids else None)

        views = [
            task_to_view(
                t,
                doctor=doctors.get(t.doctor_id) if is_valid_id(t.doctor_id) else None,
                intake=intakes.get(t.id),
                appointment=appointments.get(t.id),
                documents=docs_by_task.get(t.id, []),
                care_portal_base=self.care_portal_base,
            )
            for t in tasks
        ]

        links = CaseLinks(
            care_portal_patient=(
                f"{self.care_portal_base}/admin/patients/{patient.id}/edit"
                if self.care_portal_base and patient.id else None
            ),
        )
        return CaseViewSuccess(
            data=CaseViewData(patient=patient_to_view(patient, now=now), tasks=views, links=links),
        )


def group_documents_by_task(documents: list[DocumentOut], fallback_task_id: int | None) -> dict[int, list[DocumentOut]]:
    """Group documents per task id.

    A document without a task id is attached to ``fallback_task_id`` (the newest
    task). This is a best-effort placement kept for compatibility with the portal.
    """
    grouped: dict[int, list[DocumentOut]] = {}
    for doc in documents:
        target = doc.task_id if doc.task_id is not None else fallback_task_id
        if target is None:
            continue
        grouped.setdefault(target, []).append(doc)
    return grouped

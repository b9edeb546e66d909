from datetime import datetime

import pytest

from caseview.modules.patients.repository import PatientRepository
from caseview.modules.tasks.repository import TaskRepository
from caseview.modules.directory.repository import DoctorRepository
from caseview.modules.intake.repository import IntakeFormRepository
from caseview.modules.appointments.repository import AppointmentRepository
from caseview.modules.documents.repository import DocumentRepository

from conftest import make_appointment, make_doctor, make_document, make_intake, make_patient, make_task


class _NoQuerySession:
    async def execute(self, *args, **kwargs):
        raise AssertionError("no query expected")


# ---- Contact resolver ----

async def test_find_by_contact_email_only(session_factory, seed):
    await seed(make_patient(1, email="a@example.com"), make_patient(2, email="b@example.com"))
    async with session_factory() as s:
        p = await PatientRepository(s).find_by_contact(email="  b@example.com ")
    assert p.id == 2


async def test_find_by_contact_phone_only(session_factory, seed):
    await seed(make_patient(1, phone="111"), make_patient(2, phone="222"))
    async with session_factory() as s:
        p = await PatientRepository(s).find_by_contact(phone="111")
    assert p.id == 1


async def test_find_by_contact_matches_either_identifier_and_prefers_newest(session_factory, seed):
    await seed(
        make_patient(1, email="old@example.com", phone="999", created_at=datetime(2020, 1, 1)),
        make_patient(2, email="new@example.com", phone="000", created_at=datetime(2023, 1, 1)),
    )
    async with session_factory() as s:
        repo = PatientRepository(s)
        assert (await repo.find_by_contact(email="old@example.com", phone="000")).id == 2
        assert (await repo.find_by_contact(email="old@example.com", phone="nope")).id == 1


async def test_find_by_contact_shared_phone_picks_latest(session_factory, seed):
    await seed(
        make_patient(1, phone="555", created_at=datetime(2021, 1, 1)),
        make_patient(2, phone="555", created_at=datetime(2022, 1, 1)),
    )
    async with session_factory() as s:
        assert (await PatientRepository(s).find_by_contact(phone="555")).id == 2


async def test_find_by_contact_no_match_or_no_input(session_factory, seed):
    await seed(make_patient(1))
    async with session_factory() as s:
        repo = PatientRepository(s)
        assert await repo.find_by_contact(email="missing@example.com") is None
    assert await PatientRepository(_NoQuerySession()).find_by_contact(email="  ", phone=None) is None


# ---- Task retriever ----

async def test_list_for_patient_newest_first_and_limited(session_factory, seed):
    await seed(
        make_patient(1),
        *[make_task(i, 1, datetime(2024, 1, i)) for i in range(1, 6)],
        make_task(99, 2, datetime(2024, 2, 1)),
    )
    async with session_factory() as s:
        tasks = await TaskRepository(s).list_for_patient(1, 3)
    assert [t.id for t in tasks] == [5, 4, 3]


async def test_list_for_patient_without_tasks(session_factory, seed):
    await seed(make_patient(1))
    async with session_factory() as s:
        assert list(await TaskRepository(s).list_for_patient(1, 10)) == []


# ---- Side loaders ----

async def test_doctors_by_ids(session_factory, seed):
    await seed(make_doctor(7), make_doctor(8, first_name="Lisa", last_name="Cuddy"))
    async with session_factory() as s:
        doctors = await DoctorRepository(s).get_by_ids([7, 8, 404])
    assert set(doctors) == {7, 8}
    assert doctors[8].last_name == "Cuddy"


async def test_latest_intake_per_task(session_factory, seed):
    await seed(
        make_intake(1, task_id=10, created_at=datetime(2024, 1, 1), last_step="step-1"),
        make_intake(2, task_id=10, created_at=datetime(2024, 3, 1), last_step="step-5"),
        make_intake(3, task_id=11, created_at=datetime(2024, 2, 1), last_step="only"),
    )
    async with session_factory() as s:
        intakes = await IntakeFormRepository(s).latest_by_task_ids([10, 11, 12])
    assert set(intakes) == {10, 11}
    assert intakes[10].id == 2
    assert intakes[10].last_step == "step-5"


async def test_latest_appointment_per_task_uses_start_time(session_factory, seed):
    await seed(
        make_appointment(1, task_id=10, start_at=datetime(2024, 5, 1), created_at=datetime(2024, 4, 20)),
        make_appointment(2, task_id=10, start_at=datetime(2024, 4, 1), created_at=datetime(2024, 4, 25)),
    )
    async with session_factory() as s:
        appts = await AppointmentRepository(s).latest_by_task_ids([10])
    assert appts[10].id == 1


async def test_empty_keys_short_circuit_without_query():
    s = _NoQuerySession()
    assert await DoctorRepository(s).get_by_ids([]) == {}
    assert await IntakeFormRepository(s).latest_by_task_ids([]) == {}
    assert await AppointmentRepository(s).latest_by_task_ids([]) == {}
    assert await DocumentRepository(s).list_for_tasks([], 1) == []
    assert await DocumentRepository(s).list_for_tasks([1], None) == []


# ---- Documents ----

async def test_documents_scoped_to_tasks_and_patient(session_factory, seed):
    await seed(
        make_document(1, task_id=10, patient_id=1, type="Placard", sub_type="Permanent Permit"),
        make_document(2, task_id=10, patient_id=2, type="Placard"),  # mislinked to another patient
        make_document(3, task_id=20, patient_id=1, type="Envelope"),  # task outside the set
        make_document(4, task_id=11, patient_id=1, type=None),
    )
    async with session_factory() as s:
        docs = await DocumentRepository(s).list_for_tasks([10, 11], 1)
    assert [d.id for d in docs] == [1, 4]
    assert docs[0].sub_type == "Permanent Permit"
    assert docs[0].model_dump(by_alias=True)["fileType"] == "pdf"
    assert docs[1].tag is None


async def test_documents_doctor_filter(session_factory, seed):
    await seed(
        make_document(1, task_id=10, patient_id=1, type="Prescription", doctor_id=7),
        make_document(2, task_id=10, patient_id=1, type="Prescription", doctor_id=8),
        make_document(3, task_id=10, patient_id=1, type="Prescription", doctor_id=None),
    )
    async with session_factory() as s:
        repo = DocumentRepository(s)
        assert [d.id for d in await repo.list_for_tasks([10], 1, [7])] == [1]
        assert [d.id for d in await repo.list_for_tasks([10], 1, [])] == [1, 2, 3]

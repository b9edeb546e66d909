"""
Test configuration and fixtures.

Provides:
- A throwaway SQLite database (aiosqlite) with the portal tables created
- A session factory shared by repositories and the case view service
- Small builders for seeding patients, tasks and their related rows
"""
import os
from datetime import datetime

# Keep the app off the real database; settings are read at import time.
os.environ["DATABASE_DSN"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENV"] = "local"
os.environ.pop("EXTENSION_TASK_API_KEY", None)
os.environ.pop("ZENDESK_API_KEY", None)

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from caseview.core.base import Base
from caseview.modules.patients.models import Patient
from caseview.modules.tasks.models import Task
from caseview.modules.directory.models import Doctor
from caseview.modules.intake.models import IntakeForm
from caseview.modules.appointments.models import Appointment
from caseview.modules.documents.models import Document


# =============================================================================
# Database
# =============================================================================

@pytest_asyncio.fixture
async def session_factory(tmp_path):
    # file-backed so concurrent sessions see the same data
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'caseview.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    await engine.dispose()


@pytest.fixture
def seed(session_factory):
    async def _seed(*objs):
        async with session_factory() as s:
            s.add_all(objs)
            await s.commit()
        return objs
    return _seed


# =============================================================================
# Builders
# =============================================================================

def make_patient(id: int, **kw) -> Patient:
    data = dict(
        first_name="Jane",
        last_name="Doe",
        email=f"patient{id}@example.com",
        phone=f"555-000-{id:04d}",
        city="Austin",
        state="TX",
        created_at=datetime(2024, 1, 1),
    )
    data.update(kw)
    return Patient(id=id, **data)


def make_task(id: int, patient_id: int, created_at: datetime, **kw) -> Task:
    data = dict(type="Appointment", tag="New", status="Waiting to start")
    data.update(kw)
    return Task(id=id, patient_id=patient_id, created_at=created_at, **data)


def make_doctor(id: int, **kw) -> Doctor:
    data = dict(first_name="Gregory", last_name="House", phone_number="555-111-2222", credentials="Physician")
    data.update(kw)
    return Doctor(id=id, **data)


def make_document(id: int, task_id: int | None, patient_id: int, type: str | None, **kw) -> Document:
    data = dict(name=f"doc-{id}.pdf", url=f"https://files.example.com/{id}.pdf", file_type="pdf")
    data.update(kw)
    return Document(id=id, task_id=task_id, patient_id=patient_id, type=type, **data)


def make_intake(id: int, task_id: int, created_at: datetime, **kw) -> IntakeForm:
    data = dict(patient_id=1, form_id="intake-v1")
    data.update(kw)
    return IntakeForm(id=id, task_id=task_id, created_at=created_at, **data)


def make_appointment(id: int, task_id: int, start_at: datetime, **kw) -> Appointment:
    data = dict(patient_id=1, status="scheduled")
    data.update(kw)
    return Appointment(id=id, task_id=task_id, start_at=start_at, **data)

from typing import Sequence
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from caseview.modules.tasks.models import Task

class TaskRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_for_patient(self, patient_id: int, limit: int = 10) -> Sequence[Task]:
        # limit is clamped by the caller
        q = (
            select(Task)
            .where(Task.patient_id == patient_id)
            .order_by(Task.created_at.desc().nulls_last(), Task.id.desc())
            .limit(limit)
        )
        res = await self.session.execute(q)
        return res.scalars().all()

from typing import Iterable
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from caseview.core.utils import first_per_key
from caseview.modules.intake.models import IntakeForm

class IntakeFormRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def latest_by_task_ids(self, task_ids: Iterable[int]) -> dict[int, IntakeForm]:
        task_ids = list(task_ids)
        if not task_ids:
            return {}
        # newest first, so the first row seen per task is the latest submission
        q = (
            select(IntakeForm)
            .where(IntakeForm.task_id.in_(task_ids))
            .order_by(IntakeForm.created_at.desc().nulls_last(), IntakeForm.id.desc())
        )
        res = await self.session.execute(q)
        return first_per_key(res.scalars().all(), key=lambda row: row.task_id)

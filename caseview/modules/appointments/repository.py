from typing import Iterable
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from caseview.core.utils import first_per_key
from caseview.modules.appointments.models import Appointment

class AppointmentRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def latest_by_task_ids(self, task_ids: Iterable[int]) -> dict[int, Appointment]:
        task_ids = list(task_ids)
        if not task_ids:
            return {}
        q = (
            select(Appointment)
            .where(Appointment.task_id.in_(task_ids))
            .order_by(Appointment.start_at.desc().nulls_last(), Appointment.id.desc())
        )
        res = await self.session.execute(q)
        return first_per_key(res.scalars().all(), key=lambda row: row.task_id)

from typing import Iterable
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from caseview.modules.directory.models import Doctor

class DoctorRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_ids(self, ids: Iterable[int]) -> dict[int, Doctor]:
        ids = list(ids)
        if not ids:
            return {}
        res = await self.session.execute(select(Doctor).where(Doctor.id.in_(ids)))
        return {d.id: d for d in res.scalars().all()}

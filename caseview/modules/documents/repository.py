from typing import Iterable
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from caseview.modules.documents.models import Document
from caseview.modules.documents.schemas import DocumentOut

class DocumentRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_for_tasks(
        self,
        task_ids: Iterable[int],
        patient_id: int | None,
        doctor_ids: Iterable[int] | None = None,
    ) -> list[DocumentOut]:
        """Documents attached to ``task_ids`` that also belong to ``patient_id``.

        The patient filter is applied even though task ids already imply a patient,
        so a mislinked document can never surface in another patient's view.
        """
        task_ids = list(task_ids)
        doctor_ids = list(doctor_ids or [])
        if not task_ids or patient_id is None:
            return []
        cond = [Document.task_id.in_(task_ids), Document.patient_id == patient_id]
        if doctor_ids:
            cond.append(Document.doctor_id.in_(doctor_ids))
        res = await self.session.execute(select(Document).where(*cond).order_by(Document.id))
        return [DocumentOut.model_validate(row) for row in res.scalars().all()]

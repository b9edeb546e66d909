from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession
from caseview.modules.patients.models import Patient

class PatientRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_contact(self, email: str | None = None, phone: str | None = None) -> Patient | None:
        """Resolve one patient from an email and/or phone.

        With both identifiers any record matching either one qualifies; the most
        recently created match wins.
        """
        email = (email or "").strip()
        phone = (phone or "").strip()
        if email and phone:
            cond = or_(Patient.email == email, Patient.phone == phone)
        elif email:
            cond = Patient.email == email
        elif phone:
            cond = Patient.phone == phone
        else:
            return None
        q = (
            select(Patient)
            .where(cond)
            .order_by(Patient.created_at.desc().nulls_last(), Patient.id.desc())
            .limit(1)
        )
        res = await self.session.execute(q)
        return res.scalars().first()

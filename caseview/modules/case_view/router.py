from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from caseview.core.config import settings
from caseview.core.db import SessionLocal
from caseview.core.security import require_api_key
from caseview.modules.case_view.schemas import CaseViewFailure
from caseview.modules.case_view.service import CaseViewService

router = APIRouter()

def svc() -> CaseViewService:
    return CaseViewService(SessionLocal, care_portal_url=settings.APP_URL, default_limit=settings.DEFAULT_TASK_LIMIT)

@router.get("", dependencies=[Depends(require_api_key)])
async def get_case_view(
    email: str | None = None,
    phone: str | None = None,
    limit: str | None = Query(default=None),
    service: CaseViewService = Depends(svc),
):
    """
    Case view for the support widget: patient, latest tasks and everything joined to them.
    The limit is kept as a raw string so non-numeric values clamp instead of failing validation.
    """
    result = await service.fetch_case_view(email=email, phone=phone, limit=limit)
    status_code = 200
    if isinstance(result, CaseViewFailure):
        status_code = result.status or 400
    return JSONResponse(status_code=status_code, content=result.model_dump(by_alias=True, mode="json"))

from datetime import datetime, timezone
from fastapi import APIRouter
from caseview.core.config import settings
from caseview.modules.case_view.router import router as case_view_router

api_router = APIRouter()
api_router.include_router(case_view_router, prefix="/case-view", tags=["case-view"])

@api_router.get("/ping", tags=["health"])
async def ping():
    return {"msg": "ping", "date": datetime.now(timezone.utc).isoformat(), "name": settings.APP_NAME}

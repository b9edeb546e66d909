import time
import logging
from dotenv import load_dotenv

# Load environment variables from .env file before anything else
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from caseview.core.config import settings
from caseview.core.db import engine
from caseview.core.logging import setup_logging, request_id_ctx
from caseview.api.router import api_router


setup_logging()
app = FastAPI(title=settings.APP_NAME)

logger = logging.getLogger(__name__)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = (time.time() - start_time) * 1000
    formatted_process_time = f"{process_time:.2f}ms"

    logger.info(
        f"Request: {request.method} {request.url.path} - Response: {response.status_code} - Time: {formatted_process_time}"
    )

    return response

# registered last so it runs first and the access log carries the id
@app.middleware("http")
async def add_request_id(request: Request, call_next):
    rid = request.headers.get("x-request-id", "-")
    request_id_ctx.set(rid)
    response = await call_next(request)
    return response

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled exception for request {request.method} {request.url.path}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Unexpected server error", "status": 500},
    )


@app.on_event("shutdown")
async def on_shutdown():
    await engine.dispose()


app.include_router(api_router, prefix=settings.API_PREFIX)

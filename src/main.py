from fastapi import FastAPI
import logging

from routers.api import router as api_router
from schemas import AppHealthOK, MessageResponse
from core.config_loader import config_loader

logger = logging.getLogger(__name__)

settings = config_loader.get_settings()

app = FastAPI(title=settings.app_name, debug=settings.debug)


@app.get("/", tags=["meta"], response_model=MessageResponse)
async def read_root() -> MessageResponse:
    return MessageResponse(message=settings.app_name)


@app.get("/health", tags=["meta"], response_model=AppHealthOK)
async def healthcheck() -> AppHealthOK:
    return AppHealthOK(status="ok", app=settings.app_name)


# mount API router under /api
app.include_router(api_router, prefix="/api")
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from fastapi import APIRouter

from . import health, assistant

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(assistant.router, prefix="/assistant", tags=["assistant"])

# src/api/routes/health_router.py
from fastapi import APIRouter

from core.config.settings import settings

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("/")
async def health_check():
    return {
        "status": "ok",
        "github_auth": "token" if settings.GITHUB_PERSONAL_ACCESS_TOKEN else "anonymous",
    }

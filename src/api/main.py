# src/api/main.py

from fastapi import FastAPI
from contextlib import asynccontextmanager
from typing import Optional

from core.config.settings import settings
from core.containers.app_containers import AppContainer
from core.logging.logger import get_logger
from api.routes.health_router import router as health_router
from api.routes.github_router import router as github_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: AppContainer = app.container

    github = container.github()
    logger.info("GitHub client ready")

    yield

    github.close()
    logger.info("GitHub client closed")


def create_app(container: Optional[AppContainer] = None) -> FastAPI:
    container = container or AppContainer()
    container.wire(modules=["api.routes.github_router"])
    app = FastAPI(
        title=settings.APP_NAME,
        lifespan=lifespan
    )

    app.container = container

    app.include_router(health_router)
    app.include_router(github_router)

    return app


app = create_app()

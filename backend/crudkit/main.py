"""FastAPI application factory.

JSON endpoints are mounted under ``/api/v1``; every CRUD controller is
mounted at its own prefix (``/articles``, ...).
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from starlette.middleware.sessions import SessionMiddleware

from crudkit.config import Settings, get_settings
from crudkit.infrastructure.database import Base, engine
from crudkit.infrastructure.logging.log_config import setup_logging
from crudkit.presentation.api.router import router as api_router
from crudkit.presentation.controllers import article_router

logger = logging.getLogger(__name__)

CRUD_ROUTERS: tuple[APIRouter, ...] = (article_router,)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    setup_logging()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables)))

    yield

    await engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    # Signed cookie session; holds the flash messages between redirect and render
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret_key,
        session_cookie=settings.session_cookie,
        https_only=settings.app_env == "production",
    )

    app.include_router(api_router)
    for router in CRUD_ROUTERS:
        app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("crudkit.main:app", host="0.0.0.0", port=8020, reload=True)

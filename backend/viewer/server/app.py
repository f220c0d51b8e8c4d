from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING

import structlog
import uvicorn
from starlette.applications import Starlette
from starlette.responses import JSONResponse
from starlette.routing import Route

from shared.db import Database, SqliteResultRepository
from shared.logging import setup_logging
from viewer.server.middleware import SecurityHeadersMiddleware, SlashNormalizationMiddleware
from viewer.server.settings import CompareServerSettings
from viewer.views import compare_api, compare_page, create_templates, seeds_page

logger = structlog.get_logger()

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from starlette.requests import Request


async def health(request: Request) -> JSONResponse:
    settings: CompareServerSettings = request.app.state.settings
    return JSONResponse({"status": "ok", "version": settings.app_version, "commit": settings.git_commit})


def create_app(settings: CompareServerSettings | None = None) -> Starlette:
    if settings is None:  # pragma: no cover
        settings = CompareServerSettings()

    routes = [
        Route("/", seeds_page, methods=["GET"], name="seeds_page"),
        Route("/compare", compare_page, methods=["GET"], name="compare_page_query"),
        Route("/compare/{seed}", compare_page, methods=["GET"], name="compare_page"),
        Route("/api/compare/{seed}", compare_api, methods=["GET"], name="compare_api"),
        Route("/health", health, methods=["GET"], name="health"),
    ]

    db = Database(settings.database_path)
    db.connect()

    @contextlib.asynccontextmanager
    async def lifespan(_app: Starlette) -> AsyncIterator[None]:  # pragma: no cover
        yield
        db.close()

    app = Starlette(routes=routes, lifespan=lifespan)
    app.add_middleware(SlashNormalizationMiddleware)  # type: ignore[arg-type]
    app.add_middleware(SecurityHeadersMiddleware)  # type: ignore[arg-type]

    app.state.db = db
    app.state.settings = settings
    app.state.result_repo = SqliteResultRepository(db)
    app.state.templates = create_templates()

    logger.info("compare server ready", database_path=settings.database_path)
    return app


def get_app() -> Starlette:  # pragma: no cover
    """Factory function for uvicorn --factory viewer.server.app:get_app."""
    s = CompareServerSettings()
    setup_logging(log_dir=s.log_dir)
    return create_app(settings=s)


def main() -> None:  # pragma: no cover
    """Entry point for the klaverjas-compare console script."""
    s = CompareServerSettings()
    uvicorn.run("viewer.server.app:get_app", factory=True, host=s.host, port=s.port, log_config=None)

"""API server entry point — wires content, theme cascade and session into FastAPI."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from periodical.config import load_settings
from periodical.content.registry import ContentRegistry
from periodical.content.resolver import ConfigResolver
from periodical.content.site import load_site_content
from periodical.errors import MalformedError, NotFoundError
from periodical.logging import configure_logging
from periodical.routes import editions, screen, session, site
from periodical.state import ReaderSession
from periodical.theme.cascade import ThemeCascade

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load global content and build the read-only components once."""
    settings = load_settings()
    configure_logging(settings.app.log_level, log_file=settings.app.log_file or None)

    logger.info("Starting reader API — content root %s", settings.content.root)
    site_content = load_site_content(settings.content.global_dir)
    registry = ContentRegistry.discover(settings.content.content_dir)

    app.state.settings = settings
    app.state.site = site_content
    app.state.registry = registry
    app.state.resolver = ConfigResolver(registry)
    app.state.cascade = ThemeCascade(site_content.style)
    app.state.session = ReaderSession()

    logger.info("Reader API ready — %d editions, latest %s", len(registry), registry.latest_edition())
    yield
    logger.info("Reader API shut down")


async def _not_found(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def _malformed(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Malformed content for %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Content is malformed"},
    )


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    app = FastAPI(title="Periodical", lifespan=lifespan)
    app.add_exception_handler(NotFoundError, _not_found)
    app.add_exception_handler(MalformedError, _malformed)
    app.include_router(site.router)
    app.include_router(editions.router)
    app.include_router(screen.router)
    app.include_router(session.router)
    return app


def main() -> None:
    """Run the API server."""
    settings = load_settings()
    uvicorn.run(
        "periodical.app:create_app",
        factory=True,
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.app.is_development,
    )


if __name__ == "__main__":
    main()

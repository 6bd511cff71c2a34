"""FastAPI application factory.

Lifespan
--------
On startup the app configures logging and creates the in-memory job relay
(shared across all requests via ``request.app.state.jobs``).  Relay jobs do
not survive a restart.

Routers
-------
All endpoint groups are mounted under ``/api``:

    /api/fetch-article, /api/feed   : cleaned article text, news feed
    /api/summarize                  : LLM summary of an article
    /api/prompts                    : prompt library
    /api/queue, /api/pending,
    /api/result/{id}                : relay for the out-of-band worker
    /api/feedback                   : summary ratings

Errors are returned as ``{"error": "..."}`` with the matching status code;
anything unexpected becomes a 500 with the same shape.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from summary_tester import __version__
from summary_tester.config import settings
from summary_tester.logging import configure_logging
from summary_tester.store.jobs import JobQueue

from summary_tester.api.routers import articles as articles_router
from summary_tester.api.routers import feedback as feedback_router
from summary_tester.api.routers import prompts as prompts_router
from summary_tester.api.routers import relay as relay_router
from summary_tester.api.routers import summarize as summarize_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Set up logging and a fresh job relay on startup."""
    configure_logging(settings.log_level)
    app.state.jobs = JobQueue()
    yield


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": f"Fehler beim Laden: {exc}"})


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="Summary Tester API",
        description=(
            "Fetches news articles, strips site boilerplate, summarizes them "
            "with Anthropic or OpenAI-compatible models, and collects feedback."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(Exception, _unexpected_error)

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(articles_router.router, prefix="/api", tags=["articles"])
    app.include_router(summarize_router.router, prefix="/api", tags=["summarize"])
    app.include_router(prompts_router.router, prefix="/api", tags=["prompts"])
    app.include_router(relay_router.router, prefix="/api", tags=["relay"])
    app.include_router(feedback_router.router, prefix="/api", tags=["feedback"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn summary_tester.api.app:app --reload
app = create_app()

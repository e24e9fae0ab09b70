"""Build the CookMeet FastAPI application.

Routes carry no version prefix because the web client calls them as
``/signup``, ``/cuisines`` and so on.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from pathlib import Path
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from cookmeet.infrastructure.persistence.sqlalchemy.models import Base
from cookmeet.infrastructure.storage import create_blob_storage
from cookmeet.presentation.api.csrf import HEADER_NAME, CSRFMiddleware
from cookmeet.presentation.api.dependencies import get_engine
from cookmeet.presentation.api.exception_handlers import setup_exception_handlers
from cookmeet.presentation.api.routers import auth_router, cuisines_router
from cookmeet_config.settings import Settings, get_settings

API_VERSION = "1.0.0"
MEDIA_PATH = "/media"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "botocore", "boto3", "urllib3")

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": (
            "Sign-up, login and profile changes. Login sets an HttpOnly "
            "`token` cookie; unsafe requests must echo the `_csrf` cookie "
            "in the `X-CSRF-Token` header."
        ),
    },
    {"name": "Cuisines", "description": "The current user's recipe bookmarks."},
    {"name": "Health", "description": "Liveness probe."},
]

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _configure_logging(level_name: str) -> None:
    """Route all records to stdout once per process."""
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in ("cookmeet", "cookmeet_auth"):
        logging.getLogger(name).setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create missing tables on startup, release the pool on shutdown."""
    settings: Settings = app.state.settings
    engine = get_engine(settings.database_url)

    logger.info("Starting %s API v%s", settings.app_name, API_VERSION)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (ConnectionRefusedError, OSError):
        logger.critical("Database unreachable at startup")
        raise SystemExit(1) from None
    logger.info("Database schema ready")

    yield

    await engine.dispose()
    logger.info("%s API stopped, database pool disposed", settings.app_name)


def _mount_media(app: FastAPI, settings: Settings) -> None:
    """Serve the local blob directory so returned icon URLs resolve."""
    media_dir = Path(settings.storage_local_dir)
    media_dir.mkdir(parents=True, exist_ok=True)
    app.mount(MEDIA_PATH, StaticFiles(directory=media_dir), name="media")
    logger.debug("Serving %s at %s", media_dir, MEDIA_PATH)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Assemble routers, middleware and error handlers.

    Parameters
    ----------
    settings
        Explicit settings, mostly for tests; the cached environment
        settings are used when omitted.
    """
    settings = settings or get_settings()
    _configure_logging(settings.log_level)

    docs_enabled = settings.api_debug
    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Bookmark recipes from anywhere, with an icon and a comment.",
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.blob_storage = create_blob_storage(settings)

    if settings.csrf_enabled:
        app.add_middleware(CSRFMiddleware, settings=settings)
    # Added last so it runs first and answers preflights before the CSRF check
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", HEADER_NAME],
    )

    setup_exception_handlers(app)

    app.include_router(auth_router, tags=["Authentication"])
    app.include_router(cuisines_router, prefix="/cuisines", tags=["Cuisines"])

    if settings.storage_backend == "local":
        _mount_media(app, settings)

    @app.get("/health", tags=["Health"])
    async def health() -> dict:
        return {"status": "healthy", "version": API_VERSION}

    return app


def run() -> None:
    """Entry point of the ``cookmeet-api`` script."""
    settings = get_settings()
    uvicorn.run(
        "cookmeet.presentation.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
    )

"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import APIRouter, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError

from fluentpath.config import configure_logging, get_settings
from fluentpath.database import (
    create_tables,
    dispose_engine,
    get_session_factory,
    initialize_database,
)
from fluentpath.domain.common.exceptions import DomainError, EntityNotFoundError
from fluentpath.exceptions import FluentPathError, PersistenceError
from fluentpath.infrastructure.identity.routers import users
from fluentpath.infrastructure.learning.routers import (
    modules,
    progress,
    test_attempts,
    tests,
)
from fluentpath.seed import seed_demo_content

settings = get_settings()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    create_tables()
    if settings.SEED_DEMO_CONTENT:
        db = get_session_factory(settings)()
        try:
            seed_demo_content(db)
        finally:
            db.close()
    logger.info(
        "application_started",
        environment=settings.ENVIRONMENT,
        ai_enabled=settings.ai_enabled,
    )
    yield
    dispose_engine()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FluentPathError)
async def fluentpath_error_handler(request: Request, exc: FluentPathError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.warning(
            "request_failed", path=request.url.path, status=exc.status_code, error=exc.message
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(EntityNotFoundError)
async def entity_not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


@app.exception_handler(OperationalError)
async def persistence_error_handler(request: Request, exc: OperationalError) -> JSONResponse:
    error = PersistenceError()
    logger.error("persistence_unavailable", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=error.status_code, content={"detail": error.message})


api_router = APIRouter(prefix=settings.API_V1_PREFIX)


@api_router.get("/")
async def api_root() -> dict[str, str]:
    return {
        "message": f"{settings.PROJECT_NAME} v1",
        "version": settings.VERSION,
        "docs": f"{settings.API_V1_PREFIX}/docs",
    }


api_router.include_router(users.router)
api_router.include_router(progress.router)
api_router.include_router(modules.router)
api_router.include_router(tests.router)
api_router.include_router(test_attempts.router)
app.include_router(api_router)


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}

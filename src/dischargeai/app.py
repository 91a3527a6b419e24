"""
FastAPI application factory and main app configuration.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import certifi
from beanie import init_beanie
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from motor.motor_asyncio import AsyncIOMotorClient
from pydantic.alias_generators import to_camel

from .adapters.db.mongo.models.discharge_m import CounterMongo, DischargeSummaryMongo
from .adapters.db.mongo.repositories.discharge_repository import MongoDischargeSummaryRepository
from .api.errors import APIError
from .api.routers import discharges, health, pages
from .application.use_cases.seed_discharge_summaries import SeedDischargeSummariesUseCase
from .core.config import DatabaseSettings, Settings, get_settings
from .core.container import Container, ServiceNames, build_container
from .core.exceptions import DischargeAIException
from .core.structured_logger import configure_logging
from .domain.errors import DomainError, InvalidDischargeDataError
from .middleware.performance_middleware import PerformanceMiddleware
from .middleware.request_id_middleware import RequestIDMiddleware

logger = logging.getLogger("dischargeai")

STATIC_DIR = Path(__file__).resolve().parent / "web" / "static"

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def create_mongo_client(database: DatabaseSettings) -> AsyncIOMotorClient:
    """Motor client; TLS with the certifi CA bundle for Atlas SRV URIs only."""
    if database.uri.startswith("mongodb+srv://"):
        return AsyncIOMotorClient(
            database.uri,
            serverSelectionTimeoutMS=database.server_selection_timeout_ms,
            tls=True,
            tlsCAFile=certifi.where(),
            tlsAllowInvalidCertificates=False,
        )
    return AsyncIOMotorClient(
        database.uri,
        serverSelectionTimeoutMS=database.server_selection_timeout_ms,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    container: Container = app.state.container
    settings = container.settings
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.app_env} | Debug mode: {settings.debug}")
    logger.info(f"Storage backend: {settings.storage.backend}")

    mongo_client: Optional[AsyncIOMotorClient] = None
    database_ready = True
    repository = container.get(ServiceNames.DISCHARGE_REPOSITORY)
    if isinstance(repository, MongoDischargeSummaryRepository):
        try:
            mongo_client = create_mongo_client(settings.database)
            await init_beanie(
                database=mongo_client[settings.database.db_name],
                document_models=[DischargeSummaryMongo, CounterMongo],
            )
            logger.info("Database connection established")
        except Exception as e:
            # Startup continues; /health/ready reports the database error
            database_ready = False
            logger.error(f"Database connection failed: {e}", exc_info=True)

    if settings.seed_demo_data and not database_ready:
        logger.warning("Skipping demo seed: database unavailable")
    elif settings.seed_demo_data:
        try:
            await SeedDischargeSummariesUseCase(repository).execute()
        except DischargeAIException as e:
            logger.error(f"Seeding demo data failed: {e.message}")

    yield

    if mongo_client is not None:
        mongo_client.close()
    logger.info(f"{settings.app_name} shut down")


def _first_validation_error(exc: RequestValidationError) -> dict:
    errors = exc.errors()
    if not errors:
        return {"message": "Invalid request", "field": None}
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ())]
    if loc and loc[0] == "body":
        loc = loc[1:]
    return {"message": first.get("msg", "Invalid value"), "field": ".".join(loc) or None}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        content = _first_validation_error(exc)
        logger.debug(f"Rejected input on {request.method} {request.url.path}: {content}")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        field = to_camel(exc.field) if isinstance(exc, InvalidDischargeDataError) else None
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": exc.message, "field": field},
        )

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        req_id = getattr(request.state, "request_id", None)
        logger.info(f"APIError: {exc.code} ({exc.http_status}) {exc.message} | request_id={req_id}")
        return JSONResponse(status_code=exc.http_status, content={"message": exc.message})

    @app.exception_handler(DischargeAIException)
    async def application_error_handler(request: Request, exc: DischargeAIException):
        req_id = getattr(request.state, "request_id", None)
        logger.error(
            f"{exc.error_code}: {exc.message} on {request.method} {request.url.path} | request_id={req_id}",
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": INTERNAL_ERROR_MESSAGE},
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        req_id = getattr(request.state, "request_id", None)
        logger.error(
            f"Unhandled error: {type(exc).__name__} on {request.method} {request.url.path} | request_id={req_id}",
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": INTERNAL_ERROR_MESSAGE},
        )


def create_app(settings: Optional[Settings] = None, container: Optional[Container] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    if settings is None:
        settings = container.settings if container is not None else get_settings()
    if container is None:
        container = build_container(settings)

    configure_logging(settings.logging)

    app = FastAPI(
        title=settings.app_name,
        description="Discharge summary generator for inpatient pediatric units",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=False,
        allow_methods=settings.cors.allowed_methods,
        allow_headers=settings.cors.allowed_headers,
        max_age=600,
    )

    app.add_middleware(PerformanceMiddleware)
    # Outermost: request.state.request_id is set before any other middleware runs
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(discharges.router)
    app.include_router(pages.router)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.get("/api", tags=["health"])
    async def api_info():
        """Service information and endpoint map."""
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "environment": settings.app_env,
            "status": "running",
            "docs": "/docs",
            "endpoints": {
                "health": "/health",
                "create_discharge": "POST /api/discharges",
                "list_discharges": "GET /api/discharges",
                "get_discharge": "GET /api/discharges/{id}",
                "download_pdf": "GET /api/discharges/{id}/pdf",
                "download_docx": "GET /api/discharges/{id}/docx",
            },
        }

    return app


# Create the app instance
app = create_app()

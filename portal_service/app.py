"""
FastAPI job portal service.

Provides CRUD endpoints over the jobportal MongoDB database: job postings,
job applications (enriched with job display fields on read), and the
cookie-based token endpoints guarding an applicant's own listing.
"""

import logging
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pymongo.errors import PyMongoError

from . import __version__
from .config import settings, validate_config_on_startup
from .models import HealthResponse
from .repositories import DocumentRepositoryInterface, get_job_repository, reset_repositories
from .routes import applications_router, jobs_router, session_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)

# Validate configuration at startup
validate_config_on_startup()

app = FastAPI(title="Job Portal", version=__version__)

# Credentials must be allowed for the token cookie to cross origins
if settings.cors_origins_list:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(session_router)
app.include_router(jobs_router)
app.include_router(applications_router)


@app.exception_handler(PyMongoError)
async def database_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    """Turn driver failures into a structured 503 instead of a bare 500."""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"detail": "Database unavailable"})


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "Server is running...."


@app.get("/health", response_model=HealthResponse)
def health_check(
    repository: DocumentRepositoryInterface = Depends(get_job_repository),
) -> HealthResponse:
    """
    Health check endpoint for container orchestration.

    Reports "degraded" instead of failing when MongoDB does not answer a ping.
    """
    try:
        repository.ping()
        return HealthResponse(
            status="healthy",
            database="connected",
            timestamp=datetime.now(timezone.utc),
        )
    except PyMongoError as e:
        logger.warning(f"Health check ping failed: {e}")
        return HealthResponse(
            status="degraded",
            database="unreachable",
            timestamp=datetime.now(timezone.utc),
            database_error=str(e),
        )


@app.on_event("startup")
def ping_database_on_startup():
    """Ping MongoDB once so connectivity problems show up in the startup log."""
    try:
        get_job_repository().ping()
        logger.info("Pinged your deployment. You successfully connected to MongoDB!")
    except PyMongoError as e:
        # Requests will surface the same failure as 503s
        logger.error(f"MongoDB ping failed on startup: {e}")


@app.on_event("shutdown")
def close_database_on_shutdown():
    """Close the shared MongoClient."""
    reset_repositories()
    logger.info(f"Portal service on port {settings.port} shut down")

"""Biblia FastAPI Application."""
from contextlib import asynccontextmanager
from datetime import datetime
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException

from app.config import get_settings
from app.database import Database
from app.models.schemas import HealthCheck
from app.routers import bible
from app.middleware.api_request_logging import ApiRequestLoggingMiddleware
from app.utils.exceptions import BAD_REQUEST_MESSAGE, INTERNAL_ERROR_MESSAGE

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Get settings
settings = get_settings()

OPENAPI_TAGS = [
    {"name": "Libros", "description": "Operaciones sobre libros de la Biblia"},
    {"name": "Capítulos", "description": "Operaciones sobre capítulos"},
    {"name": "Versículos", "description": "Operaciones sobre versículos"},
    {"name": "Búsqueda", "description": "Búsqueda de texto en la Biblia"},
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the database handle for the lifetime of the process.

    Settings are read at startup, not at import.
    """
    logger.info("Initializing application resources...")
    app.state.db = Database(get_settings())
    logger.info("Application startup complete")
    try:
        yield
    finally:
        logger.info("Shutting down application...")
        app.state.db.close()
        logger.info("Application shutdown complete")


# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description=(
        "API REST para consultar la Biblia católica en español (Biblia de Jerusalén 1976): "
        "libros, capítulos, versículos y búsqueda de texto."
    ),
    version="1.0.0",
    openapi_tags=OPENAPI_TAGS,
    lifespan=lifespan,
)

app.add_middleware(ApiRequestLoggingMiddleware)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(bible.router)


@app.get("/", include_in_schema=False)
async def root():
    """Send visitors to the interactive API documentation."""
    return RedirectResponse(url="/docs")


@app.get("/health", response_model=HealthCheck)
def health_check(request: Request):
    """Health check endpoint."""
    database_ok = request.app.state.db.ping()
    return HealthCheck(
        status="healthy" if database_ok else "degraded",
        database="ok" if database_ok else "unavailable",
        timestamp=datetime.utcnow(),
    )


# Error handlers
@app.exception_handler(HTTPException)
async def http_error_handler(request: Request, exc: HTTPException):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": BAD_REQUEST_MESSAGE},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )

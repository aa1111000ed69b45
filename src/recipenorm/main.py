"""FastAPI application entry point."""

import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from recipenorm import __version__
from recipenorm.config import settings
from recipenorm.logging_config import LoggingContext, configure_logging, get_logger
from recipenorm.routers import normalize_router

# Configure logging on module load
configure_logging(log_level=settings.log_level)
logger = get_logger(__name__)

app = FastAPI(
    title="Recipenorm API",
    description="Metric normalization of recipe ingredients and instructions",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(request: Request, call_next):
    """Tag every log line of a request with a request id."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    with LoggingContext(request_id=request_id):
        response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


app.include_router(normalize_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "recipenorm-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Recipenorm API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }

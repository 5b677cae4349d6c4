"""FastAPI server for the star catalog."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api import router as api_router
from .env_config import configure_logging, STORAGE_BACKEND
from .exceptions import InvalidArgumentError, StarNotFoundError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for app startup/shutdown."""
    configure_logging()
    logger.info("Star catalog starting with %s storage", STORAGE_BACKEND)

    yield

    logger.info("Star catalog stopped")


app = FastAPI(
    title="Star Catalog API",
    description="REST API for star records and star list analytics",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    """Map business-rule violations to 400."""
    logger.error("Illegal argument: %s", exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(StarNotFoundError)
async def not_found_handler(request: Request, exc: StarNotFoundError):
    """Map missing stars to 404."""
    logger.error("Not found: %s", exc)
    return JSONResponse(status_code=404, content={"detail": str(exc)})


# Include routers
app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}

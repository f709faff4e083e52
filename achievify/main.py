"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from achievify.api import auth, health, planner, timetable, todos, uploads, wall
from achievify.api.dependencies import get_blob_store
from achievify.config import get_settings
from achievify.exceptions import AchievifyError

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    get_blob_store().ensure_dirs()
    logger.info(f"Achievify API starting ({settings.environment})")
    yield


app = FastAPI(
    title="Achievify API",
    description="Todos, timetable, weekly planner and inspiration wall",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(AchievifyError)
async def achievify_error_handler(request: Request, exc: AchievifyError):
    """Render domain errors as ``{"message": ...}``."""
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and parameters are client errors, reported as 400."""
    logger.debug(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request"},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Log unexpected failures and return a generic message."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Server error"},
    )


# Register routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(todos.router)
app.include_router(timetable.router)
app.include_router(planner.router)
app.include_router(wall.router)
app.include_router(uploads.router)

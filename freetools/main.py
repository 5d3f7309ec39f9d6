"""
Main FastAPI application entry point.
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from freetools import __version__
from freetools.api import router as api_router
from freetools.api.schemas import ErrorResponse
from freetools.calculations.validation import CalculationValidationError
from freetools.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Free finance, student and social media calculators",
    version=__version__,
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Requested-With"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@app.exception_handler(CalculationValidationError)
async def calculation_error_handler(request: Request, exc: CalculationValidationError):
    """Reject invalid calculator input with the calculator's own message."""
    logger.warning(f"Rejected {request.url.path}: {exc.field}: {exc.message}")
    return JSONResponse(status_code=400, content=ErrorResponse(error=exc.message).model_dump())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies in the same envelope as calculator errors."""
    errors = exc.errors()
    message = "Invalid request body"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first["loc"] if part != "body")
        message = f"{field}: {first['msg']}" if field else first["msg"]
    logger.warning(f"Rejected {request.url.path}: {message}")
    return JSONResponse(status_code=400, content=ErrorResponse(error=message).model_dump())


@app.exception_handler(ArithmeticError)
async def computation_error_handler(request: Request, exc: ArithmeticError):
    """Internal calculation faults are never the caller's fault."""
    logger.exception(f"Calculation failed for {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="Internal server error").model_dump(),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error for {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="Internal server error").model_dump(),
    )


@app.get("/")
async def root():
    """Describe the API and its tool groups."""
    return {
        "success": True,
        "message": "FreeTools API Backend",
        "version": __version__,
        "endpoints": {
            "health": "/api/health",
            "tools": {
                "finance": "/api/tools/finance/*",
                "student": "/api/tools/student/*",
                "socialMedia": "/api/tools/social-media/*",
            },
        },
        "timestamp": _timestamp(),
    }


@app.get("/api/health")
async def api_health():
    """Health check endpoint used by the frontend."""
    return {
        "success": True,
        "message": "Backend API is running",
        "timestamp": _timestamp(),
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": __version__, "timestamp": _timestamp()}

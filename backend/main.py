"""Main FastAPI application for FleetSync AI.

Entry point for the application. Configures:
- FastAPI app with settings
- CORS and rate limiting middleware
- Exception handlers
- Route registration
"""

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import get_app_config, get_cors_config, get_settings, setup_logging
from dependencies import get_firestore_service
from middleware import RateLimitConfig, RateLimitMiddleware
from responses import ActionResult, ResponseCode, error_dict, format_validation_errors
from router import router as api_router

setup_logging()
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Management
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown."""
    logger.info("Starting FleetSync AI...")

    try:
        settings = get_settings()
        setup_logging(settings.log_level)
        logger.info("Environment: %s", settings.environment)
        logger.info("LLM Model: %s", settings.llm_model)

        if not settings.maps_api_key:
            logger.warning("MAPS_API_KEY is not set; map features will be disabled")

        firestore = get_firestore_service()
        firestore_health = await firestore.health_check()
        if firestore_health.get("status") != "healthy":
            logger.error("Firestore unhealthy: %s", firestore_health)
            raise RuntimeError(f"Firestore health check failed: {firestore_health}")
        logger.info(
            "Firestore connected (latency: %sms)", firestore_health.get("latency_ms")
        )

        logger.info("FleetSync AI started successfully")

    except Exception as e:
        logger.error("Startup validation failed: %s", e)
        raise

    yield

    logger.info("Shutting down FleetSync AI...")


app_config = get_app_config()
app = FastAPI(lifespan=lifespan, **app_config)

app.add_middleware(CORSMiddleware, **get_cors_config())

# Protects the endpoints that call the LLM provider
app.add_middleware(
    RateLimitMiddleware,
    config=RateLimitConfig(trust_forwarded_for=get_settings().trust_forwarded_for),
)


# =============================================================================
# Middleware
# =============================================================================


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID to all requests for tracing."""
    request_id = str(uuid.uuid4())[:8]
    request.state.request_id = request_id

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id

    return response


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Report body and query validation errors in the action result shape."""
    result = ActionResult(error=format_validation_errors(exc.errors()))
    return JSONResponse(status_code=422, content=result.model_dump())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Handle HTTP exceptions."""
    request_id = getattr(request.state, "request_id", None)

    if isinstance(exc.detail, dict) and "code" in exc.detail:
        return JSONResponse(status_code=exc.status_code, content=exc.detail)

    code_map = {
        401: ResponseCode.UNAUTHORIZED,
        404: ResponseCode.NOT_FOUND,
        405: ResponseCode.VALIDATION_ERROR,
        429: ResponseCode.LLM_RATE_LIMIT,
    }

    response_code = code_map.get(exc.status_code, ResponseCode.INTERNAL_ERROR)

    error_response = error_dict(
        code=response_code,
        custom_message=str(exc.detail),
        request_id=request_id,
    )

    return JSONResponse(status_code=exc.status_code, content=error_response)


@app.exception_handler(Exception)
async def general_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Handle unhandled exceptions."""
    request_id = getattr(request.state, "request_id", None)

    logger.exception("Unhandled exception: %s", exc)

    error_response = error_dict(
        code=ResponseCode.INTERNAL_ERROR,
        custom_message="An unexpected error occurred",
        error_details={"exception_type": type(exc).__name__},
        request_id=request_id,
    )

    return JSONResponse(status_code=500, content=error_response)


# =============================================================================
# Routes
# =============================================================================

app.include_router(api_router, prefix="/api")


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint - shows API info."""
    return {
        "name": "FleetSync AI",
        "description": "Field-service management API",
        "docs": "/api/docs",
        "health": "/api/health",
    }


# =============================================================================
# Development Server
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )

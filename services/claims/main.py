"""
Claims Service - Main Application
=================================

FastAPI application for HEAT claim submission, token transfers, fee
collection and administration.

Version: 0.1.0
"""

from contextlib import asynccontextmanager
from typing import Any
from uuid import uuid4

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from heat.config import NullifierBackend, settings
from heat.database.redis import RedisClient
from heat.errors import ErrorCategory, HeatError, NullifierReused, ReentrantCall
from heat.logging import bind_context, clear_context, get_logger, setup_logging
from heat.models.common import ErrorResponse, HealthResponse
from heat.system import get_system
from services.claims.routes import admin, claims, events, fees, token


# Setup logging
setup_logging(
    log_level=settings.log_level.value,
    json_logs=settings.is_production,
    service_name="claims",
)

logger = get_logger(__name__)


_STATUS_BY_CATEGORY = {
    ErrorCategory.INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.AUTHORIZATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCategory.ACCOUNTING: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCategory.ACCESS: status.HTTP_403_FORBIDDEN,
    ErrorCategory.SYSTEM: status.HTTP_503_SERVICE_UNAVAILABLE,
}

_STATUS_BY_CODE = {
    NullifierReused.code: status.HTTP_409_CONFLICT,
    ReentrantCall.code: status.HTTP_409_CONFLICT,
}


def http_status_for(exc: HeatError) -> int:
    """HTTP status for a core error."""
    return _STATUS_BY_CODE.get(exc.code, _STATUS_BY_CATEGORY[exc.category])


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    """Application lifespan manager."""
    logger.info(
        "claims_service_starting",
        environment=settings.environment.value,
        port=settings.ports.claims,
    )

    # Startup
    try:
        if settings.nullifiers.backend == NullifierBackend.REDIS:
            RedisClient.get_client()
            logger.info("redis_connected")

        system = get_system()
        logger.info(
            "heat_system_ready",
            verifier_mode=system.claims.verifier.mode.value,
            minter=system.claims.identity,
        )

    except Exception as e:
        logger.error("startup_failed", error=str(e))
        raise

    yield

    # Shutdown
    logger.info("claims_service_shutting_down")
    await RedisClient.close()


# Create FastAPI application
app = FastAPI(
    title="HEAT Claims Service",
    description="Mint authorization for HEAT against Fuego burn proofs",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins_list,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(request: Request, call_next: Any) -> Any:
    """Bind a request id to every log line of the request."""
    clear_context()
    bind_context(
        request_id=request.headers.get("x-request-id", uuid4().hex),
        path=request.url.path,
    )
    return await call_next(request)


# ============================================================================
# Health Check Endpoints
# ============================================================================


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """
    Service health check.

    Returns health status of the core and its collaborators.
    """
    components = await get_system().health_check()

    all_healthy = all(c.get("status") == "healthy" for c in components.values())

    return HealthResponse(
        status="healthy" if all_healthy else "degraded",
        service="claims",
        version="0.1.0",
        components=components,
    )


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "service": "HEAT Claims Service",
        "version": "0.1.0",
        "docs": "/docs",
    }


# ============================================================================
# Include Routers
# ============================================================================

app.include_router(
    claims.router,
    prefix="/api/v1/claims",
    tags=["Claims"],
)

app.include_router(
    token.router,
    prefix="/api/v1/token",
    tags=["Token"],
)

app.include_router(
    fees.router,
    prefix="/api/v1/fees",
    tags=["Fees"],
)

app.include_router(
    admin.router,
    prefix="/api/v1/admin",
    tags=["Admin"],
)

app.include_router(
    events.router,
    prefix="/api/v1/events",
    tags=["Events"],
)


# ============================================================================
# Error Handlers
# ============================================================================


@app.exception_handler(HeatError)
async def heat_error_handler(request: Any, exc: HeatError) -> JSONResponse:
    """Render core rejections."""
    status_code = http_status_for(exc)
    logger.warning(
        "request_rejected",
        error_code=exc.code,
        category=exc.category.value,
        status_code=status_code,
        path=request.url.path,
    )
    body = ErrorResponse(
        error=exc.message,
        error_code=exc.code,
        status_code=status_code,
        details=exc.details or None,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Any, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions."""
    logger.warning(
        "http_exception",
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "status_code": exc.status_code,
        },
        headers=exc.headers,
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Any, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(
        "unhandled_exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": "Internal server error",
            "status_code": 500,
        },
    )


# ============================================================================
# Run with Uvicorn
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "services.claims.main:app",
        host="0.0.0.0",
        port=settings.ports.claims,
        reload=settings.debug,
        log_level=settings.log_level.value.lower(),
    )

"""
app/main.py

Purpose: Application entry point

- Initializes FastAPI app
- Loads configuration and logging
- Registers API routes (order webhook, operator endpoints)
- No business logic should be written here
- Manages application lifecycle (startup/shutdown)
"""

from fastapi import FastAPI, Request
from contextlib import asynccontextmanager
import time

from app.core.config import settings, validate_settings
from app.core.errors import add_exception_handlers
from app.core.logging import setup_logging, get_logger
from app.api import admin, webhook

# Initialize logging first
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info("🚀 Starting NALO SMS notification service...")

    try:
        logger.info("Validating configuration...")
        validate_settings()
        logger.info("✅ Configuration validated")

        if not (settings.NALO_AUTH_KEY and settings.NALO_SENDER_ID):
            logger.warning("⚠️ NALO credentials not set, notifications will be skipped")

        logger.info(f"Environment: {settings.ENVIRONMENT}")
        logger.info(f"Debug Mode: {settings.DEBUG}")

    except Exception as e:
        logger.critical(f"Failed to start application: {str(e)}", exc_info=True)
        raise

    yield  # Application runs here

    logger.info("👋 NALO SMS notification service shut down")


app = FastAPI(
    title="NALO SMS Order Notifications",
    description="Sends order status SMS to customers through the NALO gateway",
    version="2.4.0",
    lifespan=lifespan,
    debug=settings.DEBUG,
    docs_url="/docs" if settings.is_development else None,  # Disable docs in production
    redoc_url="/redoc" if settings.is_development else None,
)

add_exception_handlers(app)


# Request timing middleware
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Add processing time header to all responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    # Gateway timeout is 20s, anything close to it is worth a look
    if process_time > 5.0:
        logger.warning(
            f"Slow request detected: {request.method} {request.url.path} ({process_time:.2f}s)"
        )

    return response


app.include_router(webhook.router, prefix=settings.API_PREFIX, tags=["Webhook"])
app.include_router(admin.router, prefix=settings.API_PREFIX, tags=["Admin"])


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - basic info."""
    return {
        "name": "NALO SMS Order Notifications",
        "version": "2.4.0",
        "status": "running",
        "environment": settings.ENVIRONMENT
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint.
    Reports whether the gateway credentials are present.
    """
    credentials_set = bool(settings.NALO_AUTH_KEY and settings.NALO_SENDER_ID)
    return {
        "status": "healthy" if credentials_set else "degraded",
        "timestamp": time.time(),
        "environment": settings.ENVIRONMENT,
        "version": "2.4.0",
        "checks": {
            "nalo_credentials": "configured" if credentials_set else "missing"
        }
    }


# Liveness probe (for Kubernetes/orchestration)
@app.get("/live", tags=["Health"])
async def liveness_check():
    """
    Liveness probe - indicates if app is alive.
    """
    return {"status": "alive"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower()
    )

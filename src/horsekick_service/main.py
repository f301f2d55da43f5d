"""
FastAPI application entry point for the Horse-Kick Prediction Service.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from horsekick_service.api.error_handlers import EXCEPTION_HANDLERS
from horsekick_service.api.middleware import RequestTracingMiddleware
from horsekick_service.api.routes import router
from horsekick_service.config import settings
from horsekick_service.logging_config import configure_logging
from horsekick_service.scoring.model import load_model

# Configure structured logging before the app starts emitting events
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Acquire the model handle for the lifetime of the process."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        model_path=settings.MODEL_PATH or "<bundled>",
    )
    # ModelLoadError propagates and aborts startup
    app.state.model = load_model(settings.MODEL_PATH)
    logger.info("Application startup complete", model_version=app.state.model.version)

    yield

    logger.info("Application shutdown")
    app.state.model = None


app = FastAPI(
    title=settings.APP_NAME,
    description="Expected deaths by horse kick per Prussian army corps and year",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Request tracing middleware (request_id in all logs)
app.add_middleware(RequestTracingMiddleware)

# Register exception handlers
for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(router, tags=["predict"])

# Prometheus metrics instrumentation
if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


@app.get("/")
async def root():
    """Root endpoint with API documentation links."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/health",
        "predict": "/predict",
        "metrics": "/metrics" if settings.PROMETHEUS_ENABLED else None,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "horsekick_service.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )

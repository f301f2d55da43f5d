"""
FastAPI API routes and endpoints.

- routes.py: POST /predict, GET /health, GET /version
- dependencies.py: Dependency injection for settings, sanitizer and model handle
- models.py: API-specific response models
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request tracing
"""

from horsekick_service.api.routes import router

__all__ = ["router"]

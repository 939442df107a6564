# app\adapters\api\routers\__init__.py
"""
API Route Definitions.

This package contains the specific route handlers (controllers) organized by domain area.
- `users`: List / get / create endpoints for the users resource.
- `system`: Root liveness banner and health check.
"""

from .users import router as users_router
from .system import router as system_router

__all__ = [
    "users_router",
    "system_router",
]

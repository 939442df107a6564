# app/adapters/api/dependencies.py
from typing import Any, Dict, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.responses import JSONResponse

from app.core.domain.models import User
from app.core.use_cases.resource_handlers import HandlerResponse, ResourceHandlers
from app.shared.container import Container


# -----------------------------------------------------------------------------
# Use case injection
# -----------------------------------------------------------------------------
@inject
def get_user_handlers(
    handlers: ResourceHandlers[User] = Depends(Provide[Container.user_handlers]),
) -> ResourceHandlers[User]:
    """Dependency to inject the users ResourceHandlers (container-managed)."""
    return handlers


# -----------------------------------------------------------------------------
# Response rendering
# -----------------------------------------------------------------------------
def render(result: HandlerResponse, headers: Optional[Dict[str, Any]] = None) -> JSONResponse:
    """Serializes a framework-agnostic HandlerResponse into a JSONResponse."""
    return JSONResponse(status_code=result.status_code, content=result.body, headers=headers)

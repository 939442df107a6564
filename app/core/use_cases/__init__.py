# app\core\use_cases\__init__.py
"""
Core Use Cases (Application Logic).

This package contains the "Interactors" of the system. They orchestrate
the flow of data between the Domain Entities and the Infrastructure Ports:
1. Validating untrusted input into domain models.
2. Interacting with Ports (Entity Store).
3. Returning framework-agnostic response descriptions.
"""

from .parsing import format_errors, parse_create_input
from .resource_handlers import HandlerResponse, ResourceHandlers

__all__ = [
    "HandlerResponse",
    "ResourceHandlers",
    "format_errors",
    "parse_create_input",
]

# app/core/domain/exceptions.py
from typing import Any, Dict, List, Union

class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Entity Not Found Errors ---

class EntityNotFoundError(DomainError):
    """Raised when an id has no matching record in a store."""
    def __init__(self, resource: str, entity_id: Union[int, str]):
        self.resource = resource
        self.entity_id = entity_id
        super().__init__(f"{resource} not found")

# --- Validation Errors ---

class InvalidPayloadError(DomainError):
    """Raised when a request body does not match the expected input shape."""
    def __init__(self, resource: str, errors: List[Dict[str, Any]]):
        self.resource = resource
        self.errors = errors
        super().__init__(f"Invalid {resource.lower()} payload")

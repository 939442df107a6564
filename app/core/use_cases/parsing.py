# app\core\use_cases\parsing.py
from typing import Any, Dict, Iterable, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.core.domain.exceptions import InvalidPayloadError

M = TypeVar("M", bound=BaseModel)

def format_errors(errors: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Flattens pydantic-style errors into [{"field": "age", "message": "..."}]."""
    return [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())) or "body",
            "message": err.get("msg", "Invalid value"),
        }
        for err in errors
    ]

def parse_create_input(model: Type[M], raw: Any, resource: str = "Entity") -> M:
    """
    Turns an untrusted request body into a validated create-input model.

    Args:
        model: The input model (e.g. UserCreate).
        raw: The decoded JSON body, as received.
        resource: Display name used in the error message (e.g. 'User').

    Returns:
        An instance of `model`.

    Raises:
        InvalidPayloadError: If the body is not an object or a field is
            missing or has the wrong primitive type.
    """
    if not isinstance(raw, dict):
        raise InvalidPayloadError(
            resource,
            [{"field": "body", "message": "Request body must be a JSON object"}],
        )

    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise InvalidPayloadError(resource, format_errors(e.errors())) from e

# app\adapters\api\routers\users.py
import re
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Path, Request, status
from fastapi.responses import JSONResponse

from app.adapters.api.dependencies import get_user_handlers, render
from app.core.domain.models import User
from app.core.use_cases.resource_handlers import ResourceHandlers

router = APIRouter(prefix="/users", tags=["Users"])

_ID_PATTERN = re.compile(r"-?[0-9]+")

def parse_id(raw: str) -> Optional[int]:
    """Decimal id from a path segment; None for "abc", "2abc", "1.5" and the like."""
    match = _ID_PATTERN.fullmatch(raw.strip())
    return int(match.group(0)) if match else None

HTTP_422_UNPROCESSABLE = 422

_NOT_FOUND = {"description": "No user with this id", "content": {"application/json": {"example": {"message": "User not found"}}}}

@router.get(
    "",
    summary="List users",
    description="Returns all users in the order they were created.",
    response_model=List[User],
    status_code=status.HTTP_200_OK,
)
async def list_users(
    handlers: ResourceHandlers[User] = Depends(get_user_handlers),
) -> JSONResponse:
    return render(handlers.list_all())

@router.get(
    "/{user_id}",
    summary="Get a user",
    description="Fetch a single user by its numeric id. Anything that is not an id answers 404.",
    response_model=User,
    responses={status.HTTP_404_NOT_FOUND: _NOT_FOUND},
)
async def get_user(
    user_id: str = Path(..., description="Store-assigned user id"),
    handlers: ResourceHandlers[User] = Depends(get_user_handlers),
) -> JSONResponse:
    entity_id = parse_id(user_id)
    if entity_id is None:
        return render(handlers.not_found(user_id))
    return render(handlers.get_one(entity_id))

@router.post(
    "",
    summary="Create a user",
    description=(
        "Creates a user from a JSON object with `name` (string), `email` (string) "
        "and `age` (integer). The id is assigned by the server."
    ),
    status_code=status.HTTP_201_CREATED,
    responses={HTTP_422_UNPROCESSABLE: {"description": "Malformed user payload"}},
)
async def create_user(
    request: Request,
    # Kept untyped here: the body is validated by the handler, not by FastAPI.
    payload: Any = Body(..., examples=[{"name": "Dave", "email": "dave@x.com", "age": 22}]),
    handlers: ResourceHandlers[User] = Depends(get_user_handlers),
) -> JSONResponse:
    result = handlers.create_one(payload)
    headers: Dict[str, Any] = {}
    if result.status_code == status.HTTP_201_CREATED:
        headers["Location"] = str(request.url_for("get_user", user_id=result.body["user"]["id"]))
    return render(result, headers=headers or None)

# app\core\domain\models.py
from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, Field

# --- Base Shapes ---

class Identified(BaseModel):
    """
    Base class for every record held by an entity store.

    The `id` is assigned by the store at creation time and is never reused.
    Records are frozen: once stored, nobody mutates them in place.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Store-assigned identifier (monotonic, never reused)")

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready representation used in response bodies."""
        return self.model_dump(mode="json")

# --- Users ---

class UserCreate(BaseModel):
    """
    Validated input for creating a user.
    This is what a POST /api/users body must parse into.
    """
    # Strict: "22" is not an age, True is not an age. Unknown keys are dropped.
    model_config = ConfigDict(strict=True, extra="ignore")

    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Contact e-mail address")
    age: int = Field(..., description="Age in years")

class User(Identified):
    """
    A stored user.
    """
    name: str
    email: str
    age: int

# app/adapters/persistence/seed.py
from typing import List

from app.core.domain.models import User, UserCreate
from app.adapters.persistence.memory_store import EntityStore

# Demo records; inserted through EntityStore.create so they receive ids 1, 2, 3.
DEMO_USERS: List[UserCreate] = [
    UserCreate(name="Alice", email="alice@example.com", age=28),
    UserCreate(name="Bob", email="bob@example.com", age=34),
    UserCreate(name="Charlie", email="charlie@example.com", age=25),
]

def build_user_store(seed: bool = True) -> EntityStore[User]:
    """Creates the process-wide user store, optionally pre-loaded with demo users."""
    return EntityStore(User, initial=DEMO_USERS if seed else ())

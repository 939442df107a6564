# tests\conftest.py
import pytest
from fastapi.testclient import TestClient

from app.adapters.api.main import create_app
from app.adapters.persistence.memory_store import EntityStore
from app.adapters.persistence.seed import build_user_store
from app.core.domain.models import User, UserCreate
from app.core.use_cases.resource_handlers import ResourceHandlers
from app.shared.container import container as app_container

@pytest.fixture(scope="function")
def empty_store():
    """A fresh store with nothing in it."""
    return EntityStore(User)

@pytest.fixture(scope="function")
def seeded_store():
    """A fresh store holding Alice (1), Bob (2) and Charlie (3)."""
    return build_user_store(seed=True)

@pytest.fixture(scope="function")
def handlers(seeded_store):
    """Users handlers bound to the seeded store."""
    return ResourceHandlers(seeded_store, UserCreate, resource_name="User", envelope_key="user")

@pytest.fixture(scope="function")
def container(seeded_store):
    """
    The application DI container with the user store overridden by a fresh
    seeded store, so no test sees records created by another.
    """
    app_container.user_store.override(seeded_store)

    yield app_container

    # Clean up overrides after test
    app_container.user_store.reset_override()

@pytest.fixture
def client(container):
    """FastAPI TestClient running the full app (lifespan included)."""
    app = create_app()
    with TestClient(app) as c:
        yield c

@pytest.fixture
def dave_payload():
    """Provides a valid create body."""
    return {"name": "Dave", "email": "dave@x.com", "age": 22}

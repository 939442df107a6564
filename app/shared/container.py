# app\shared\container.py
from dependency_injector import containers, providers

from app.shared.config import settings
from app.adapters.persistence.seed import build_user_store
from app.core.domain.models import UserCreate
from app.core.use_cases.resource_handlers import ResourceHandlers

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the application.
    """

    # 1. Configuration
    # We load settings directly, but wrapping them allows overriding in tests.
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Gateways (Infrastructure Adapters)

    # User Store (Singleton: the one authoritative collection for the process)
    user_store = providers.Singleton(
        build_user_store,
        seed=config.SEED_DEMO_DATA,
    )

    # 3. Use Cases (Application Logic)

    # Factory: New instance created for every request (stateless logic),
    # but with the Singleton store injected.
    user_handlers = providers.Factory(
        ResourceHandlers,
        store=user_store,
        input_model=UserCreate,
        resource_name="User",
        envelope_key="user",
    )

# Instantiate the container for global access (e.g. by FastAPI)
container = Container()

# tests\shared\test_container.py
from app.adapters.persistence.memory_store import EntityStore
from app.core.use_cases.resource_handlers import ResourceHandlers
from app.shared.container import Container

class TestContainer:

    def test_store_is_a_singleton(self):
        container = Container()
        assert container.user_store() is container.user_store()

    def test_handlers_share_the_store(self):
        container = Container()
        first = container.user_handlers()
        second = container.user_handlers()

        assert isinstance(first, ResourceHandlers)
        assert first is not second
        assert first.store is second.store

    def test_store_is_seeded_by_default(self):
        store = Container().user_store()
        assert isinstance(store, EntityStore)
        assert [u.name for u in store.get_all()] == ["Alice", "Bob", "Charlie"]

    def test_override_replaces_the_store(self, empty_store):
        container = Container()
        container.user_store.override(empty_store)
        try:
            assert container.user_handlers().store is empty_store
        finally:
            container.user_store.reset_override()

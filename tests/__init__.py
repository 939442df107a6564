# tests\__init__.py
"""
Test Suite for the Users API.

Organization:
- `core`: Domain models, input parsing, handlers and the in-memory store.
- `shared`: Settings and the DI container.
- `adapters`: End-to-end HTTP tests through FastAPI's TestClient.
"""

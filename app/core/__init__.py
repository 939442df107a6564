# app\core\__init__.py
"""
Core Layer.

Domain models, ports and use cases for the users service:
- No dependencies on the web framework (FastAPI) or on where records live.
- Defines the Entity Store Port that the persistence adapters implement.
- Use cases return plain response descriptions; adapters turn them into HTTP.
"""

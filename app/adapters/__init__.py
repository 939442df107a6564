# app\adapters\__init__.py
"""
Infrastructure Adapters.

- `api`: FastAPI HTTP entry point.
- `persistence`: Entity store implementations.
"""

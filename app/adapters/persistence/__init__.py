# app/adapters/persistence/__init__.py
"""
Persistence adapters.

Implementations of the store ports. Currently only an in-memory store:
state lives for the lifetime of the process.
"""

from .memory_store import EntityStore
from .seed import DEMO_USERS, build_user_store

__all__ = ["EntityStore", "DEMO_USERS", "build_user_store"]

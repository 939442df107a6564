# app\core\ports\__init__.py
"""
Core Ports (Interfaces).

This package defines the Protocols that the Infrastructure Adapters must
implement. These interfaces allow the Core to read and write records without
knowing where they are kept.
"""

from .entity_store import IEntityStore

__all__ = [
    "IEntityStore",
]

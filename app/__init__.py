# app\__init__.py
"""
Users API - in-memory entity store behind a small CRUD HTTP surface.

This package follows Hexagonal Architecture (Ports & Adapters):
`core` (domain, ports, use cases), `adapters` (HTTP, persistence),
`shared` (config, logging, DI container).
"""

__version__ = "1.0.0"

# app\shared\__init__.py
"""
Shared utilities package.

This module contains cross-cutting concerns used by both the Core
and Infrastructure Adapters, including:
- Configuration management
- Structured logging
- Dependency Injection wiring
"""

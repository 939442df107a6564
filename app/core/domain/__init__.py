# app\core\domain\__init__.py
"""
Domain Entities and Value Objects.

This package defines the core data structures used throughout the application:
the identity-bearing records kept in entity stores (e.g. User) and the
validated inputs used to create them (e.g. UserCreate). They are devoid of
any infrastructure logic.
"""

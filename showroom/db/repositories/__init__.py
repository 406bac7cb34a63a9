"""
Per-domain repository modules for database access.

Each module exposes plain functions that take the SQLAlchemy `Session` to
run against as their first argument; nothing here holds a global handle.
"""

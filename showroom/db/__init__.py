"""Persistence: engine/session, ORM models, schemas and repositories."""

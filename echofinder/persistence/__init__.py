"""Persistence layer: SQLAlchemy Core tables and repository implementations."""

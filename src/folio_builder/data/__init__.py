"""Persistence layer: ORM models, sessions and the portfolio store."""

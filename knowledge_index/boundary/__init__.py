"""Boundary adapters: PostgreSQL, vector stores and embedding providers."""

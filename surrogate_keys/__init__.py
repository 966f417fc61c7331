"""Surrogate-Key projection for CDN-fronted FastAPI services."""

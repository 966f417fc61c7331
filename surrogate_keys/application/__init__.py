"""Application layer: services used by middleware and API endpoints."""

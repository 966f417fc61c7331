"""Shared cross-cutting helpers (telemetry). No business logic."""

"""HTTP API for Person Enrichment Service."""

from .app import app

__all__ = ["app"]

"""Command line interface for the store Management API."""
from .app import app

__all__ = ["app"]

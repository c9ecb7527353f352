"""Customer-facing read API for the beverage catalog."""
from .app import create_app

__all__ = ["create_app"]

"""DB-Handler service: sole owner of the beverage catalog state."""
from .app import create_app

__all__ = ["create_app"]

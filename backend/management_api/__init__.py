"""Validating write API in front of the DB-Handler."""
from .app import create_app

__all__ = ["create_app"]

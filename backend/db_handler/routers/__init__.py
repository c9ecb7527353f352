"""Router exports for the DB-Handler service."""
from . import beverages, health

__all__ = ["beverages", "health"]

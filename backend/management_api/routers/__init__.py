"""Router exports for the Management API."""
from . import beverages, ping

__all__ = ["beverages", "ping"]

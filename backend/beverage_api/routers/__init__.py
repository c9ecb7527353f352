"""Router exports for the Beverage API."""
from . import beverages, ping

__all__ = ["beverages", "ping"]

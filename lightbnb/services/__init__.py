"""
Service layer for the LightBnB data-access operations.
"""

from lightbnb.services.lightbnb import LightBnBService

__all__ = ["LightBnBService"]

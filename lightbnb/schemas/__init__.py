"""
Pydantic schemas for data-access inputs.
"""

from lightbnb.schemas.filters import FilterOptions
from lightbnb.schemas.property import PropertyCreate, PROPERTY_COLUMNS
from lightbnb.schemas.user import UserCreate

__all__ = [
    "FilterOptions",
    "PropertyCreate",
    "PROPERTY_COLUMNS",
    "UserCreate",
]

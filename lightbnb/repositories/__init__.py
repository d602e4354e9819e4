"""
Repository layer for data access operations.
Every repository runs its SQL through an injected query executor.
"""

from lightbnb.repositories.base import BaseRepository, QueryResult, QueryStatus
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "QueryResult",
    "QueryStatus",
    "PropertyRepository",
    "ReservationRepository",
    "UserRepository"
]

"""
LightBnB data-access service.
Exposes the operations the web layer calls: user lookup and registration,
past reservations, property search and property creation.
"""

from typing import Any, Dict, List, Mapping, Optional, Union
import logging

from lightbnb.config import Settings, get_settings
from lightbnb.database import QueryExecutor, SQLAlchemyQueryExecutor, create_engine_from_settings
from lightbnb.queries.property_search import DEFAULT_LIMIT, PropertySearchQueryBuilder
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository
from lightbnb.schemas.filters import FilterOptions
from lightbnb.schemas.property import PropertyCreate
from lightbnb.schemas.user import UserCreate
from lightbnb.stores.memory import InMemoryPropertyStore

logger = logging.getLogger(__name__)


class LightBnBService:
    """
    Data-access facade over the repositories.

    Database failures never propagate from these operations: lookups resolve
    to None and listings to an empty list. Use the repositories' ``*_result``
    methods when a caller needs to tell a failure from an empty result.
    """

    def __init__(
        self,
        executor: QueryExecutor,
        property_store: Optional[InMemoryPropertyStore] = None,
        default_limit: int = DEFAULT_LIMIT
    ):
        """
        Wire repositories around one shared executor.

        Args:
            executor: Query executor used by every database-backed operation
            property_store: In-memory store for add_property; None inserts into the database
            default_limit: Row limit for list operations called without one
        """
        self.executor = executor
        self.property_store = property_store
        self.users = UserRepository(executor)
        self.reservations = ReservationRepository(executor, default_limit)
        self.properties = PropertyRepository(
            executor,
            PropertySearchQueryBuilder(default_limit=default_limit)
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "LightBnBService":
        """Create the service with a SQLAlchemy executor and the configured property store."""
        settings = settings or get_settings()
        executor = SQLAlchemyQueryExecutor(create_engine_from_settings(settings))

        property_store = None
        if settings.uses_memory_property_store:
            if settings.properties_seed_path:
                property_store = InMemoryPropertyStore.from_json_file(settings.properties_seed_path)
            else:
                property_store = InMemoryPropertyStore()
            logger.warning("add_property writes to a non-persistent in-memory store")

        return cls(executor, property_store, settings.default_result_limit)

    # Users

    async def get_user_with_email(self, email: str) -> Optional[Dict[str, Any]]:
        return await self.users.get_by_email(email)

    async def get_user_with_id(self, user_id: Any) -> Optional[Dict[str, Any]]:
        return await self.users.get_by_id(user_id)

    async def add_user(self, user: Union[UserCreate, Mapping[str, Any]]) -> Optional[List[Dict[str, Any]]]:
        return await self.users.create_user(user)

    # Reservations

    async def get_all_reservations(self, guest_id: Any, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        return await self.reservations.get_past_reservations(guest_id, limit)

    # Properties

    async def get_all_properties(
        self,
        options: Union[FilterOptions, Mapping[str, Any], None] = None,
        limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        return await self.properties.search(options, limit)

    async def add_property(
        self,
        property_data: Union[PropertyCreate, Mapping[str, Any]]
    ) -> Optional[Dict[str, Any]]:
        """
        Create a property.

        With an in-memory store the record is stored as given under the next
        sequential id; otherwise it is validated and inserted into the
        properties table.
        """
        if self.property_store is None:
            return await self.properties.create_property(property_data)

        if isinstance(property_data, PropertyCreate):
            property_data = property_data.model_dump()
        return await self.property_store.add(property_data)

    async def close(self) -> None:
        """Release the executor's connections."""
        close = getattr(self.executor, "close", None)
        if close is not None:
            await close()

"""
Property repository for filtered search and persistent property creation.
"""

from typing import Any, Dict, List, Mapping, Optional, Union
import logging

from lightbnb.database import QueryExecutor
from lightbnb.queries.property_search import PropertySearchQueryBuilder
from lightbnb.repositories.base import BaseRepository, QueryResult
from lightbnb.schemas.filters import FilterOptions
from lightbnb.schemas.property import PROPERTY_COLUMNS, PropertyCreate

logger = logging.getLogger(__name__)

INSERT_PROPERTY = "INSERT INTO properties ({columns}) VALUES ({placeholders}) RETURNING *".format(
    columns=", ".join(PROPERTY_COLUMNS),
    placeholders=", ".join(f"${index}" for index in range(1, len(PROPERTY_COLUMNS) + 1)),
)


class PropertyRepository(BaseRepository):
    """
    Repository for property listings.
    Search statements are produced by PropertySearchQueryBuilder.
    """

    def __init__(self, executor: QueryExecutor, builder: Optional[PropertySearchQueryBuilder] = None):
        super().__init__(executor)
        self.builder = builder or PropertySearchQueryBuilder()

    async def search_result(
        self,
        options: Union[FilterOptions, Mapping[str, Any], None] = None,
        limit: Optional[int] = None
    ) -> QueryResult:
        """
        Search properties with their average rating.

        Args:
            options: Filter options (instance, mapping or None)
            limit: Maximum number of rows

        Returns:
            QueryResult with rows ordered by cost per night ascending
        """
        sql, parameters = self.builder.build(options, limit)
        return await self.run(sql, parameters, "search properties")

    async def search(
        self,
        options: Union[FilterOptions, Mapping[str, Any], None] = None,
        limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        return (await self.search_result(options, limit)).rows

    async def create_property_result(self, property_data: Union[PropertyCreate, Mapping[str, Any]]) -> QueryResult:
        """
        Insert a property into the properties table.

        Raises:
            pydantic.ValidationError: If the property data is invalid
        """
        if not isinstance(property_data, PropertyCreate):
            property_data = PropertyCreate.model_validate(dict(property_data))

        values = property_data.model_dump()
        result = await self.run(
            INSERT_PROPERTY,
            [values[column] for column in PROPERTY_COLUMNS],
            f"create property {property_data.title}"
        )
        if result.found:
            logger.info(f"Created property: {property_data.title} (ID: {result.rows[0].get('id')})")
        return result

    async def create_property(self, property_data: Union[PropertyCreate, Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
        """Insert a property and return the stored row, None if the insert failed."""
        return (await self.create_property_result(property_data)).first()

"""
Reservation repository for a guest's past stays.
"""

from typing import Any, Dict, List, Optional

from lightbnb.queries.property_search import DEFAULT_LIMIT, resolve_limit
from lightbnb.repositories.base import BaseRepository, QueryResult
from lightbnb.database import QueryExecutor

# Reservation columns come after property columns, so the shared "id" is the reservation's
SELECT_PAST_RESERVATIONS = """SELECT properties.*, reservations.*, avg(property_reviews.rating) AS average_rating
FROM properties
JOIN reservations ON reservations.property_id = properties.id
JOIN users ON reservations.guest_id = users.id
JOIN property_reviews ON property_reviews.property_id = properties.id
WHERE users.id = $1
AND reservations.end_date < CURRENT_DATE
GROUP BY properties.id, reservations.id
ORDER BY reservations.start_date ASC
LIMIT $2"""


class ReservationRepository(BaseRepository):
    """Repository for reservation listings."""

    def __init__(self, executor: QueryExecutor, default_limit: int = DEFAULT_LIMIT):
        super().__init__(executor)
        self.default_limit = resolve_limit(default_limit)

    async def get_past_reservations_result(self, guest_id: Any, limit: Optional[int] = None) -> QueryResult:
        """
        List a guest's reservations that ended before today.

        Args:
            guest_id: Id of the guest user
            limit: Maximum number of reservations, defaults to ``default_limit``

        Returns:
            QueryResult with rows ordered by start date ascending

        Raises:
            InvalidLimitError: If the limit is not a positive integer
        """
        limit = resolve_limit(limit, self.default_limit)
        return await self.run(
            SELECT_PAST_RESERVATIONS,
            [guest_id, limit],
            f"get reservations for guest {guest_id}"
        )

    async def get_past_reservations(self, guest_id: Any, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        return (await self.get_past_reservations_result(guest_id, limit)).rows

"""
Property search query construction.
Builds the parameterized statement behind get_all_properties from optional filters.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple, Union

from lightbnb.schemas.filters import FilterOptions
from lightbnb.utils.exceptions import InvalidLimitError

DEFAULT_LIMIT = 10

WHERE = "where"
HAVING = "having"

BASE_QUERY = (
    "SELECT properties.*, avg(property_reviews.rating) AS average_rating\n"
    "FROM properties\n"
    "JOIN property_reviews ON properties.id = property_reviews.property_id"
)


def _identity(value: Any) -> Any:
    return value


def _substring(value: Any) -> str:
    return f"%{value}%"


@dataclass(frozen=True)
class SearchFilter:
    """
    One optional search constraint.

    ``predicate`` is a format string whose single ``{}`` receives the
    placeholder; ``transform`` maps the filter value to the bound parameter.
    """

    name: str
    predicate: str
    clause: str = WHERE
    transform: Callable[[Any], Any] = _identity


# Iteration order of this table is the order predicates and parameters appear in.
# Price bounds are cast so fractional values compare against the integer column.
SEARCH_FILTERS: Tuple[SearchFilter, ...] = (
    SearchFilter("city", "properties.city LIKE {}", transform=_substring),
    SearchFilter("owner_id", "properties.owner_id = {}"),
    SearchFilter("minimum_price_per_night", "properties.cost_per_night > CAST({} AS NUMERIC)"),
    SearchFilter("maximum_price_per_night", "properties.cost_per_night < CAST({} AS NUMERIC)"),
    SearchFilter("minimum_rating", "avg(property_reviews.rating) > {}", clause=HAVING),
)


def resolve_limit(limit: Optional[int], default: int = DEFAULT_LIMIT) -> int:
    """
    Return the effective result limit.

    Raises:
        InvalidLimitError: If the limit is not a positive integer
    """
    if limit is None:
        limit = default
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidLimitError(limit)
    return limit


class PropertySearchQueryBuilder:
    """
    Translate filter options and a limit into (SQL text, parameter list).

    Placeholders are numbered ``$1..$n`` in the order parameters are appended:
    WHERE predicates in table order, then HAVING predicates, then the limit.
    Building is pure; identical inputs always give identical output.
    """

    def __init__(
        self,
        filters: Sequence[SearchFilter] = SEARCH_FILTERS,
        default_limit: int = DEFAULT_LIMIT
    ):
        self.filters = tuple(filters)
        self.default_limit = resolve_limit(default_limit)

    def build(
        self,
        options: Union[FilterOptions, Mapping[str, Any], None] = None,
        limit: Optional[int] = None
    ) -> Tuple[str, List[Any]]:
        """
        Build the property search statement.

        Args:
            options: Filter options (instance, mapping or None)
            limit: Maximum number of rows, defaults to ``default_limit``

        Returns:
            Tuple of (SQL text, positional parameters)
        """
        options = FilterOptions.coerce(options)
        limit = resolve_limit(limit, self.default_limit)
        parameters: List[Any] = []

        where = self._predicates(options, WHERE, parameters)
        having = self._predicates(options, HAVING, parameters)

        lines = [BASE_QUERY]
        if where:
            lines.append("WHERE " + " AND ".join(where))
        lines.append("GROUP BY properties.id")
        if having:
            lines.append("HAVING " + " AND ".join(having))

        parameters.append(limit)
        lines.append(f"ORDER BY cost_per_night ASC LIMIT ${len(parameters)}")

        return "\n".join(lines), parameters

    def _predicates(self, options: FilterOptions, clause: str, parameters: List[Any]) -> List[str]:
        predicates = []
        for search_filter in self.filters:
            if search_filter.clause != clause:
                continue
            value = getattr(options, search_filter.name, None)
            if not value:
                continue
            parameters.append(search_filter.transform(value))
            predicates.append(search_filter.predicate.format(f"${len(parameters)}"))
        return predicates


def build_property_search_query(
    options: Union[FilterOptions, Mapping[str, Any], None] = None,
    limit: Optional[int] = None
) -> Tuple[str, List[Any]]:
    """Build the property search statement with the default filter table."""
    return PropertySearchQueryBuilder().build(options, limit)

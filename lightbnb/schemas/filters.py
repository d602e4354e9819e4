"""
Pydantic schema for property search filters.
Accepts the web form's snake_case keys as well as camelCase aliases.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Any, Mapping, Optional, Union


class FilterOptions(BaseModel):
    """
    Optional search constraints used to narrow a property search.

    Only fields holding a truthy value take part in the query, so blank form
    inputs and zero values are treated as absent.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    city: Optional[str] = Field(
        None,
        description="Substring of the property city",
    )

    owner_id: Optional[int] = Field(
        None,
        validation_alias=AliasChoices("owner_id", "ownerId"),
        description="Exact owner (user) id",
    )

    minimum_price_per_night: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("minimum_price_per_night", "minimumPricePerNight"),
        description="Exclusive lower bound on cost_per_night",
    )

    maximum_price_per_night: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("maximum_price_per_night", "maximumPricePerNight"),
        description="Exclusive upper bound on cost_per_night",
    )

    minimum_rating: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("minimum_rating", "minimumRating"),
        description="Exclusive lower bound on the average review rating",
    )

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Treat empty form values as missing."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @classmethod
    def coerce(cls, options: Union["FilterOptions", Mapping[str, Any], None]) -> "FilterOptions":
        """Build filter options from a mapping, an existing instance or None."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))

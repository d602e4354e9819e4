"""
Pydantic schemas for property creation.
Field order matches the column order of the properties INSERT statement.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional


class PropertyCreate(BaseModel):
    """Schema for creating a new property listing."""

    owner_id: int = Field(..., gt=0, description="Id of the owning user")

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Property listing title"
    )

    description: Optional[str] = Field(None, description="Detailed property description")

    thumbnail_photo_url: str = Field(..., max_length=255)
    cover_photo_url: str = Field(..., max_length=255)

    cost_per_night: int = Field(0, ge=0, description="Nightly price")

    street: str = Field(..., max_length=255)
    city: str = Field(..., max_length=255)
    province: str = Field(..., max_length=255)
    post_code: str = Field(..., max_length=255)
    country: str = Field(..., max_length=255)

    parking_spaces: int = Field(0, ge=0)
    number_of_bathrooms: int = Field(0, ge=0)
    number_of_bedrooms: int = Field(0, ge=0)

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        """Validate and clean title."""
        if not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip()


PROPERTY_COLUMNS = tuple(PropertyCreate.model_fields)

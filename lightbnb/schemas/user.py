"""
Pydantic schemas for user requests.
"""

from pydantic import BaseModel, Field, field_validator


class UserCreate(BaseModel):
    """Schema for registering a new user."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="User's display name"
    )

    email: str = Field(
        ...,
        min_length=3,
        max_length=255,
        description="User's email address"
    )

    password: str = Field(
        ...,
        min_length=1,
        description="Password as received from the web layer"
    )

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate and clean name."""
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        """Basic email format validation."""
        v = v.strip()
        if "@" not in v:
            raise ValueError("Invalid email format")
        return v

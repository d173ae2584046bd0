"""
Pydantic schemas for restaurants.

JSON payloads use camelCase field names (``zipCode``,
``averageScoreEgg``); the Python attributes are snake_case and either
form is accepted on input.  Score fields appear only on
``RestaurantRead``: they are computed elsewhere and any score sent by
a client is ignored.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RestaurantBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RestaurantCreate(RestaurantBase):
    """Schema for creating a new restaurant."""

    name: str = Field(..., min_length=1, description="Restaurant name")
    zip_code: str = Field(..., description="Postal code, e.g. '90210'")
    country: Optional[str] = Field(None, description="Country")
    city: Optional[str] = Field(None, description="City")


class RestaurantUpdate(RestaurantBase):
    """Schema for updating an existing restaurant.

    Every field is optional.  ``name`` and ``zip_code`` are compared
    with the stored values and replaced when they differ, so leaving
    them out clears them; ``country`` is only replaced when provided.
    """

    name: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None


class RestaurantRead(RestaurantBase):
    """Schema for reading a restaurant from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    name: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    overall_score: Optional[float] = None
    average_score_egg: Optional[float] = None
    average_score_dairy: Optional[float] = None
    average_score_peanut: Optional[float] = None

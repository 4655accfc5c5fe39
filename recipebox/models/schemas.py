"""
Pydantic response models shared by the API routes and the CLI.

The wire format is camelCase (``prepTime``, ``expiryDate``); snake_case
field names are accepted on input as well.
"""
from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class IngredientResponse(CamelModel):
    """Stored ingredient."""
    id: UUID
    name: str
    quantity: Optional[str] = None
    unit: Optional[str] = None
    expiry_date: Optional[date] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "id": "550e8400-e29b-41d4-a716-446655440000",
                    "name": "Flour",
                    "quantity": "500",
                    "unit": "g",
                    "expiryDate": "2026-12-31",
                    "createdAt": "2026-10-19T12:00:00",
                }
            ]
        }
    )


class RecipeResponse(CamelModel):
    """Stored recipe."""
    id: UUID
    name: str
    ingredients: List[str]
    instructions: str
    taste: str
    cuisine: str
    prep_time: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "id": "550e8400-e29b-41d4-a716-446655440000",
                    "name": "Pancakes",
                    "ingredients": ["Flour", "Milk", "Eggs"],
                    "instructions": "Mix ingredients\nCook on griddle",
                    "taste": "sweet",
                    "cuisine": "American",
                    "prepTime": 20,
                    "createdAt": "2026-10-19T12:00:00",
                }
            ]
        }
    )


class MessageResponse(BaseModel):
    """Simple message response."""
    message: str

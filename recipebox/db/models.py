"""
SQLAlchemy ORM models for RecipeBox database.
"""
from datetime import datetime, timezone
from sqlalchemy import (
    Column, String, Integer, Date, DateTime, Text, JSON, CheckConstraint
)
from sqlalchemy.dialects.postgresql import UUID
import uuid

from recipebox.db.database import Base


class Ingredient(Base):
    """Ingredient available in the pantry."""
    __tablename__ = "ingredients"
    __table_args__ = (
        CheckConstraint("length(name) > 0", name="ck_ingredients_name_not_empty"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False, index=True)
    quantity = Column(String(100), nullable=True)
    unit = Column(String(50), nullable=True)
    expiry_date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)


class Recipe(Base):
    """Recipe with its ingredient lines and instructions."""
    __tablename__ = "recipes"
    __table_args__ = (
        CheckConstraint("length(name) > 0", name="ck_recipes_name_not_empty"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False, index=True)
    ingredients = Column(JSON, nullable=False, default=list)  # List[str]
    instructions = Column(Text, nullable=False, default="")
    taste = Column(String(100), nullable=False, default="")
    cuisine = Column(String(100), nullable=False, default="", index=True)
    prep_time = Column(Integer, nullable=False, default=0)  # minutes
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)

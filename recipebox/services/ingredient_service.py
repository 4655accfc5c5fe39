"""
Ingredient management service with database persistence.
"""
import logging
from datetime import date
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from uuid import UUID
from typing import Any, Dict, List, Optional

from recipebox.db.models import Ingredient as DBIngredient
from recipebox.errors import PersistenceError, ValidationError

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = ("name", "quantity", "unit", "expiry_date")


def _missing_names(items: List[Dict[str, Any]]) -> List[int]:
    """Indices of items without a usable name."""
    return [
        index for index, item in enumerate(items)
        if not (item.get("name") or "").strip()
    ]


class IngredientService:
    """
    Service for ingredient inventory operations.

    Adds, lists, updates and removes the ingredients the cooking assistant
    can suggest recipes for.
    """

    def __init__(self, db: Session):
        """
        Initialize the ingredient service.

        Args:
            db: SQLAlchemy database session for persistence operations.
        """
        self.db = db

    def list_ingredients(self, skip: int = 0, limit: Optional[int] = None) -> List[DBIngredient]:
        """
        List stored ingredients, oldest first.

        Args:
            skip: Number of rows to skip
            limit: Maximum number of rows to return (None for all)

        Returns:
            List of Ingredient rows
        """
        query = self.db.query(DBIngredient).order_by(DBIngredient.created_at, DBIngredient.name)
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count(self) -> int:
        """Total number of stored ingredients."""
        return self.db.query(DBIngredient).count()

    def get(self, ingredient_id: UUID) -> Optional[DBIngredient]:
        """Return the ingredient or None if not found."""
        return self.db.query(DBIngredient).filter(DBIngredient.id == ingredient_id).first()

    def create(
        self,
        name: str,
        quantity: Optional[str] = None,
        unit: Optional[str] = None,
        expiry_date: Optional[date] = None,
    ) -> DBIngredient:
        """
        Add a single ingredient.

        Args:
            name: Ingredient name (required)
            quantity: Free-form quantity, e.g. "500"
            unit: Unit for the quantity, e.g. "g"
            expiry_date: Date the ingredient expires

        Returns:
            Created Ingredient

        Raises:
            ValidationError: If the name is empty
            PersistenceError: If the database rejects the write
        """
        created = self.create_many([
            {"name": name, "quantity": quantity, "unit": unit, "expiry_date": expiry_date}
        ])
        return created[0]

    def create_many(self, items: List[Dict[str, Any]]) -> List[DBIngredient]:
        """
        Add several ingredients in one transaction.

        Either every item is stored or none is.

        Args:
            items: List of dicts with keys: name, quantity, unit, expiry_date

        Returns:
            List of created Ingredients, in input order
        """
        missing = _missing_names(items)
        if missing:
            raise ValidationError("name", missing, resource_type="ingredient")

        new_items = [
            DBIngredient(
                name=item["name"],
                quantity=item.get("quantity"),
                unit=item.get("unit"),
                expiry_date=item.get("expiry_date"),
            )
            for item in items
        ]

        try:
            self.db.add_all(new_items)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to insert {len(new_items)} ingredient(s): {e}")
            raise PersistenceError("insert", type(e).__name__, {"item_count": len(new_items)}) from e

        for item in new_items:
            self.db.refresh(item)
        return new_items

    def update(self, ingredient_id: UUID, **changes: Any) -> Optional[DBIngredient]:
        """
        Update the provided fields of an ingredient.

        Args:
            ingredient_id: UUID of the ingredient to update
            **changes: Field values to set; None clears quantity, unit or expiry_date

        Returns:
            Updated Ingredient or None if not found

        Raises:
            ValidationError: If the name is set to None or a blank string
        """
        item = self.get(ingredient_id)
        if not item:
            return None

        if "name" in changes and not (changes["name"] or "").strip():
            raise ValidationError("name", [0], resource_type="ingredient")

        for field_name in _UPDATABLE_FIELDS:
            if field_name in changes:
                setattr(item, field_name, changes[field_name])

        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError("update", type(e).__name__, {"ingredient_id": str(ingredient_id)}) from e

        self.db.refresh(item)
        return item

    def delete(self, ingredient_id: UUID) -> bool:
        """
        Remove an ingredient.

        Returns:
            True if deleted, False if not found
        """
        item = self.get(ingredient_id)
        if not item:
            return False

        self.db.delete(item)
        self.db.commit()
        return True

    def names(self) -> List[str]:
        """Names of every stored ingredient."""
        return [name for (name,) in self.db.query(DBIngredient.name).order_by(DBIngredient.created_at).all()]

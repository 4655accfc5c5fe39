"""
Recipe storage service with database persistence.

RecipeService is the SQL-backed implementation of the RecipeStore protocol
used by the ingestion pipeline.
"""
import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from uuid import UUID
from typing import Any, List, Optional, Protocol, Sequence

from recipebox.db.models import Recipe as DBRecipe
from recipebox.engine.parsing.models import ParsedRecipe
from recipebox.errors import PersistenceError, ValidationError

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = ("name", "ingredients", "instructions", "taste", "cuisine", "prep_time")


class RecipeStore(Protocol):
    """Bulk persistence interface consumed by the ingestion service."""

    def insert_many(self, records: Sequence[ParsedRecipe]) -> List[DBRecipe]:
        """Store every record atomically and return the persisted rows."""
        ...


class RecipeService:
    """
    Service for recipe CRUD operations and bulk inserts.
    """

    def __init__(self, db: Session):
        self.db = db

    def _query(self, cuisine: Optional[str] = None):
        query = self.db.query(DBRecipe)
        if cuisine:
            query = query.filter(DBRecipe.cuisine.ilike(cuisine))
        return query

    def list_recipes(
        self,
        skip: int = 0,
        limit: Optional[int] = None,
        cuisine: Optional[str] = None,
    ) -> List[DBRecipe]:
        """
        List stored recipes, oldest first.

        Args:
            skip: Number of rows to skip
            limit: Maximum number of rows to return (None for all)
            cuisine: Optional case-insensitive cuisine filter

        Returns:
            List of Recipe rows
        """
        query = self._query(cuisine).order_by(DBRecipe.created_at, DBRecipe.name)
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count(self, cuisine: Optional[str] = None) -> int:
        return self._query(cuisine).count()

    def get(self, recipe_id: UUID) -> Optional[DBRecipe]:
        """Return the recipe or None if not found."""
        return self.db.query(DBRecipe).filter(DBRecipe.id == recipe_id).first()

    def create(self, recipe: ParsedRecipe) -> DBRecipe:
        """Store a single recipe."""
        return self.insert_many([recipe])[0]

    def insert_many(self, records: Sequence[ParsedRecipe]) -> List[DBRecipe]:
        """
        Store a batch of recipes in one transaction.

        The whole batch is rejected when any record has a missing or blank
        name; nothing is written in that case.

        Args:
            records: Recipes to store

        Returns:
            Persisted Recipe rows, in input order

        Raises:
            ValidationError: If any record is missing its name
            PersistenceError: If the database rejects the batch
        """
        missing = [
            index for index, record in enumerate(records)
            if not (record.name or "").strip()
        ]
        if missing:
            logger.warning(f"Rejecting batch of {len(records)} recipe(s): {len(missing)} without a name")
            raise ValidationError("name", missing, resource_type="recipe")

        if not records:
            return []

        rows = [DBRecipe(**record.to_dict()) for record in records]

        try:
            self.db.add_all(rows)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Bulk insert of {len(rows)} recipe(s) failed: {e}")
            raise PersistenceError("insert", type(e).__name__, {"record_count": len(rows)}) from e

        for row in rows:
            self.db.refresh(row)
        return rows

    def update(self, recipe_id: UUID, **changes: Any) -> Optional[DBRecipe]:
        """
        Update the provided fields of a recipe.

        Args:
            recipe_id: UUID of the recipe to update
            **changes: Field values to set

        Returns:
            Updated Recipe or None if not found

        Raises:
            ValidationError: If a field is set to None or the name is blank
        """
        recipe = self.get(recipe_id)
        if not recipe:
            return None

        if "name" in changes and not (changes["name"] or "").strip():
            raise ValidationError("name", [0], resource_type="recipe")
        nulled = [name for name in _UPDATABLE_FIELDS if name in changes and changes[name] is None]
        if nulled:
            raise ValidationError(nulled[0], [0], resource_type="recipe")

        for field_name in _UPDATABLE_FIELDS:
            if field_name in changes:
                setattr(recipe, field_name, changes[field_name])

        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError("update", type(e).__name__, {"recipe_id": str(recipe_id)}) from e

        self.db.refresh(recipe)
        return recipe

    def delete(self, recipe_id: UUID) -> bool:
        """
        Remove a recipe.

        Returns:
            True if deleted, False if not found
        """
        recipe = self.get(recipe_id)
        if not recipe:
            return False

        self.db.delete(recipe)
        self.db.commit()
        return True

"""
Ingredient inventory API routes.
"""
import logging
from datetime import date
from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from pydantic import Field
from typing import List, Optional, Union
from uuid import UUID

from recipebox.api.dependencies import get_ingredient_service
from recipebox.api.errors import internal_error, to_http_exception
from recipebox.services.ingredient_service import IngredientService
from recipebox.models.schemas import CamelModel, IngredientResponse
from recipebox.errors import ErrorCode, IngredientNotFoundError, RecipeBoxError
from recipebox.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ingredients", tags=["ingredients"])


# Request/Response schemas
class IngredientCreate(CamelModel):
    """Request to add an ingredient."""
    name: str = Field(..., min_length=1, max_length=255)
    quantity: Optional[str] = Field(None, max_length=100, description="e.g., '500', '2'")
    unit: Optional[str] = Field(None, max_length=50, description="e.g., 'g', 'cups'")
    expiry_date: Optional[date] = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Flour",
                    "quantity": "500",
                    "unit": "g",
                    "expiryDate": "2026-12-31"
                }
            ]
        }
    }


class IngredientUpdate(CamelModel):
    """Request to update an ingredient (all fields optional)."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    quantity: Optional[str] = Field(None, max_length=100)
    unit: Optional[str] = Field(None, max_length=50)
    expiry_date: Optional[date] = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "quantity": "750"
                }
            ]
        }
    }


class IngredientListResponse(CamelModel):
    """Paginated ingredient list response."""
    ingredients: List[IngredientResponse]
    total: int
    page: int
    page_size: int


@router.get("", response_model=IngredientListResponse)
async def list_ingredients(
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(
        default=settings.pagination_default_page_size,
        ge=1,
        le=settings.pagination_max_page_size,
        alias="pageSize",
        description="Items per page",
    ),
    service: IngredientService = Depends(get_ingredient_service),
):
    """
    Get the stored ingredients.
    """
    total = service.count()
    items = service.list_ingredients(skip=(page - 1) * page_size, limit=page_size)

    return IngredientListResponse(
        ingredients=[IngredientResponse.model_validate(item) for item in items],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/{ingredient_id}", response_model=IngredientResponse)
async def get_ingredient(
    ingredient_id: UUID,
    service: IngredientService = Depends(get_ingredient_service),
):
    """
    Get a single ingredient by ID.
    """
    item = service.get(ingredient_id)
    if not item:
        raise to_http_exception(IngredientNotFoundError(str(ingredient_id)))

    return IngredientResponse.model_validate(item)


@router.post(
    "",
    response_model=Union[List[IngredientResponse], IngredientResponse],
    status_code=status.HTTP_201_CREATED,
)
async def add_ingredients(
    payload: Union[List[IngredientCreate], IngredientCreate] = Body(...),
    service: IngredientService = Depends(get_ingredient_service),
):
    """
    Add one ingredient, or several at once.

    A JSON object creates a single ingredient and returns it. A JSON array
    creates every ingredient in one transaction and returns the list.
    """
    is_bulk = isinstance(payload, list)
    items = payload if is_bulk else [payload]

    try:
        created = service.create_many([item.model_dump() for item in items])
    except RecipeBoxError as e:
        raise to_http_exception(e)
    except SQLAlchemyError as e:
        raise internal_error(
            logger, e, ErrorCode.DATABASE_QUERY_ERROR,
            "Database error occurred while adding ingredients. Please try again.",
            {"item_count": len(items)},
        )
    except Exception as e:
        raise internal_error(
            logger, e, ErrorCode.INGREDIENT_ADD_FAILED,
            f"Failed to add ingredients: {e}",
            {"item_count": len(items)},
        )

    logger.info(f"Added {len(created)} ingredient(s)")
    responses = [IngredientResponse.model_validate(item) for item in created]
    return responses if is_bulk else responses[0]


@router.put("/{ingredient_id}", response_model=IngredientResponse)
async def update_ingredient(
    ingredient_id: UUID,
    request: IngredientUpdate,
    service: IngredientService = Depends(get_ingredient_service),
):
    """
    Update an ingredient.

    Only updates fields present in the body; null clears quantity, unit or
    expiryDate. At least one field must be provided.
    """
    changes = request.model_dump(exclude_unset=True)
    if not changes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="At least one field (name, quantity, unit or expiryDate) must be provided",
        )

    try:
        item = service.update(ingredient_id, **changes)
        if not item:
            raise IngredientNotFoundError(str(ingredient_id))
    except RecipeBoxError as e:
        raise to_http_exception(e)
    except SQLAlchemyError as e:
        raise internal_error(
            logger, e, ErrorCode.DATABASE_QUERY_ERROR,
            "Database error occurred while updating ingredient. Please try again.",
            {"ingredient_id": str(ingredient_id)},
        )
    except Exception as e:
        raise internal_error(
            logger, e, ErrorCode.INGREDIENT_UPDATE_FAILED,
            f"Failed to update ingredient: {e}",
            {"ingredient_id": str(ingredient_id)},
        )

    return IngredientResponse.model_validate(item)


@router.delete("/{ingredient_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ingredient(
    ingredient_id: UUID,
    service: IngredientService = Depends(get_ingredient_service),
):
    """
    Remove an ingredient by ID.
    """
    if not service.delete(ingredient_id):
        raise to_http_exception(IngredientNotFoundError(str(ingredient_id)))

    return None

"""
Recipe API routes: CRUD operations and recipe file import.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.exc import SQLAlchemyError
from pydantic import Field
from typing import List, Optional
from uuid import UUID

from recipebox.api.dependencies import get_ingestion_service, get_recipe_service
from recipebox.api.errors import internal_error, to_http_exception
from recipebox.engine.parsing import ParsedRecipe
from recipebox.errors import ErrorCode, RecipeBoxError, RecipeNotFoundError
from recipebox.models.schemas import CamelModel, MessageResponse, RecipeResponse
from recipebox.services.ingestion_service import RecipeIngestionService
from recipebox.services.recipe_service import RecipeService
from recipebox.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


# Request/Response schemas
class RecipeCreate(CamelModel):
    """Request to create a new recipe."""
    name: str = Field(..., min_length=1, max_length=255, description="Recipe name")
    ingredients: List[str] = Field(default_factory=list, description="One entry per ingredient line")
    instructions: str = Field("", description="Instruction steps, one per line")
    taste: str = Field("", max_length=100)
    cuisine: str = Field("", max_length=100)
    prep_time: int = Field(0, ge=0, description="Prep time in minutes")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Pancakes",
                    "ingredients": ["Flour", "Milk", "Eggs"],
                    "instructions": "Mix ingredients\nCook on griddle",
                    "taste": "sweet",
                    "cuisine": "American",
                    "prepTime": 20
                }
            ]
        }
    }


class RecipeUpdate(CamelModel):
    """Request to update a recipe (all fields optional)."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    ingredients: Optional[List[str]] = None
    instructions: Optional[str] = None
    taste: Optional[str] = Field(None, max_length=100)
    cuisine: Optional[str] = Field(None, max_length=100)
    prep_time: Optional[int] = Field(None, ge=0)


class RecipeListResponse(CamelModel):
    """Paginated recipe list response."""
    recipes: List[RecipeResponse]
    total: int
    page: int
    page_size: int


class ParseFileRequest(CamelModel):
    """Request to import a plain-text recipe file from the server filesystem."""
    file_path: str = Field(..., description="Path of the recipe file, relative to the server working directory")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "filePath": "./data/my_fav_recipes.txt"
                }
            ]
        }
    }


class ParseFileResponse(CamelModel):
    """Result of a recipe file import."""
    message: str
    recipes: List[RecipeResponse]

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "message": "Successfully parsed and saved 1 recipes",
                    "recipes": [
                        {
                            "id": "550e8400-e29b-41d4-a716-446655440000",
                            "name": "Tea",
                            "ingredients": ["Tea leaves", "Water"],
                            "instructions": "Boil water\nSteep leaves",
                            "taste": "",
                            "cuisine": "",
                            "prepTime": 0
                        }
                    ]
                }
            ]
        }
    }


@router.get("", response_model=RecipeListResponse)
async def list_recipes(
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(
        default=settings.pagination_default_page_size,
        ge=1,
        le=settings.pagination_max_page_size,
        alias="pageSize",
        description="Items per page",
    ),
    cuisine: Optional[str] = Query(None, description="Filter by cuisine (case-insensitive)"),
    service: RecipeService = Depends(get_recipe_service),
):
    """
    Get list of stored recipes.

    Supports filtering by cuisine.
    """
    total = service.count(cuisine=cuisine)
    recipes = service.list_recipes(skip=(page - 1) * page_size, limit=page_size, cuisine=cuisine)

    return RecipeListResponse(
        recipes=[RecipeResponse.model_validate(recipe) for recipe in recipes],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(
    recipe_id: UUID,
    service: RecipeService = Depends(get_recipe_service),
):
    """
    Get a specific recipe by ID.
    """
    recipe = service.get(recipe_id)
    if not recipe:
        raise to_http_exception(RecipeNotFoundError(str(recipe_id)))

    return RecipeResponse.model_validate(recipe)


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
async def create_recipe(
    recipe: RecipeCreate,
    service: RecipeService = Depends(get_recipe_service),
):
    """
    Create a new recipe.
    """
    try:
        new_recipe = service.create(ParsedRecipe(**recipe.model_dump()))
    except RecipeBoxError as e:
        raise to_http_exception(e)
    except SQLAlchemyError as e:
        raise internal_error(
            logger, e, ErrorCode.DATABASE_QUERY_ERROR,
            "Database error occurred while creating recipe. Please try again.",
            {"recipe_name": recipe.name},
        )
    except Exception as e:
        raise internal_error(
            logger, e, ErrorCode.RECIPE_CREATE_FAILED,
            f"Failed to create recipe: {e}",
            {"recipe_name": recipe.name},
        )

    return RecipeResponse.model_validate(new_recipe)


@router.post("/parse-file", response_model=ParseFileResponse)
async def parse_recipe_file(
    request: ParseFileRequest,
    service: RecipeIngestionService = Depends(get_ingestion_service),
):
    """
    Parse a plain-text recipe file and save every recipe in it.

    Recipes are separated by blank lines. The first line of each recipe is
    its name, followed by optional "Ingredients:" and "Instructions:"
    sections with one entry per line. Either every recipe is saved or none.
    An empty path is rejected with 400 INGEST_PATH_RESOLUTION_FAILED.
    """
    try:
        result = service.ingest_file(request.file_path)
    except RecipeBoxError as e:
        logger.warning(f"Recipe file import failed for '{request.file_path}': {e.message}")
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error(
            logger, e, ErrorCode.INTERNAL_ERROR,
            f"Error parsing recipe file: {e}",
            {"file_path": request.file_path},
        )

    return ParseFileResponse(
        message=result.message,
        recipes=[RecipeResponse.model_validate(recipe) for recipe in result.records],
    )


@router.put("/{recipe_id}", response_model=RecipeResponse)
async def update_recipe(
    recipe_id: UUID,
    recipe_update: RecipeUpdate,
    service: RecipeService = Depends(get_recipe_service),
):
    """
    Update a recipe.

    Only updates fields present in the body. Every recipe field is required,
    so an explicit null is rejected with 422.
    """
    changes = recipe_update.model_dump(exclude_unset=True)
    if not changes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="At least one field must be provided",
        )

    try:
        recipe = service.update(recipe_id, **changes)
        if not recipe:
            raise RecipeNotFoundError(str(recipe_id))
    except RecipeBoxError as e:
        raise to_http_exception(e)
    except SQLAlchemyError as e:
        raise internal_error(
            logger, e, ErrorCode.DATABASE_QUERY_ERROR,
            "Database error occurred while updating recipe. Please try again.",
            {"recipe_id": str(recipe_id)},
        )
    except Exception as e:
        raise internal_error(
            logger, e, ErrorCode.RECIPE_UPDATE_FAILED,
            f"Failed to update recipe: {e}",
            {"recipe_id": str(recipe_id)},
        )

    return RecipeResponse.model_validate(recipe)


@router.delete("/{recipe_id}", response_model=MessageResponse)
async def delete_recipe(
    recipe_id: UUID,
    service: RecipeService = Depends(get_recipe_service),
):
    """
    Delete a recipe.
    """
    recipe = service.get(recipe_id)
    if not recipe:
        raise to_http_exception(RecipeNotFoundError(str(recipe_id)))

    name = recipe.name
    service.delete(recipe_id)

    return MessageResponse(message=f"Recipe '{name}' deleted successfully")

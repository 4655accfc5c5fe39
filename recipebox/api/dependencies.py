"""
FastAPI dependencies for services and external clients.

Routes receive their collaborators through these functions, so tests can
swap any of them with ``app.dependency_overrides``.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from recipebox.clients.openai_client import OpenAIClient
from recipebox.db.database import get_db
from recipebox.services.chat_service import ChatService
from recipebox.services.ingestion_service import RecipeIngestionService
from recipebox.services.ingredient_service import IngredientService
from recipebox.services.recipe_service import RecipeService

_llm_client = None


def get_llm_client() -> OpenAIClient:
    """
    Dependency returning the shared OpenAI client.

    The client is created on first request and reused afterwards.
    """
    global _llm_client
    if _llm_client is None:
        _llm_client = OpenAIClient()
    return _llm_client


def get_ingredient_service(db: Session = Depends(get_db)) -> IngredientService:
    return IngredientService(db)


def get_recipe_service(db: Session = Depends(get_db)) -> RecipeService:
    return RecipeService(db)


def get_ingestion_service(
    recipes: RecipeService = Depends(get_recipe_service),
) -> RecipeIngestionService:
    """
    Dependency to get the recipe file ingestion pipeline.

    Usage:
        @router.post("/parse-file")
        def parse_file(service: RecipeIngestionService = Depends(get_ingestion_service)):
            return service.ingest_file("recipes.txt")
    """
    return RecipeIngestionService(store=recipes)


def get_chat_service(
    db: Session = Depends(get_db),
    client: OpenAIClient = Depends(get_llm_client),
) -> ChatService:
    return ChatService(db, client)

"""
Cooking assistant chat service.

Builds a prompt from the stored recipes and ingredients and asks the
language model for suggestions.
"""
import logging

from sqlalchemy.orm import Session

from recipebox.clients.openai_client import OpenAIClient, OpenAIClientError
from recipebox.db.models import Recipe as DBRecipe
from recipebox.errors import ChatCompletionError, LLMNotConfiguredError
from recipebox.services.ingredient_service import IngredientService
from recipebox.services.recipe_service import RecipeService

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = """You are a helpful cooking assistant. Based on the recipes and available \
ingredients you are given, suggest appropriate recipes.

Please suggest appropriate recipes from the available ones, considering the available \
ingredients, and explain why they match the user's request."""


def format_recipe(recipe: DBRecipe) -> str:
    """Render one recipe as a context block for the prompt."""
    return (
        f"Recipe: {recipe.name}\n"
        f"Ingredients: {', '.join(recipe.ingredients or [])}\n"
        f"Taste: {recipe.taste or ''}\n"
        f"Cuisine: {recipe.cuisine or ''}\n"
        f"Prep Time: {recipe.prep_time or 0} minutes"
    )


def build_user_prompt(message: str, recipe_context: str, available_ingredients: str) -> str:
    """Build the user prompt for the LLM."""
    return f"""Available Ingredients:
{available_ingredients}

Available Recipes:
{recipe_context}

User Request: {message}"""


class ChatService:
    """
    Answers cooking questions using every stored recipe and ingredient as context.
    """

    def __init__(self, db: Session, client: OpenAIClient):
        self.recipes = RecipeService(db)
        self.ingredients = IngredientService(db)
        self.client = client

    def build_context(self) -> tuple[str, str]:
        """
        Render the stored data for the prompt.

        Returns:
            (recipe_context, available_ingredients) where recipes are separated
            by a blank line and ingredient names by ", ".
        """
        recipe_context = "\n\n".join(format_recipe(r) for r in self.recipes.list_recipes())
        available_ingredients = ", ".join(self.ingredients.names())
        return recipe_context, available_ingredients

    def suggest(self, message: str) -> str:
        """
        Ask the language model for recipe suggestions.

        Args:
            message: The user's request

        Returns:
            The assistant's reply text

        Raises:
            LLMNotConfiguredError: If no API key is configured
            ChatCompletionError: If the API call fails
        """
        recipe_context, available_ingredients = self.build_context()
        user_prompt = build_user_prompt(message, recipe_context, available_ingredients)

        try:
            return self.client.complete(system_prompt=SYSTEM_PROMPT, user_prompt=user_prompt)
        except OpenAIClientError as e:
            if not e.configured:
                raise LLMNotConfiguredError() from e
            raise ChatCompletionError(str(e)) from e

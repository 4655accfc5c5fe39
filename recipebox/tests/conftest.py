"""
Shared pytest fixtures for RecipeBox tests.

This module provides common fixtures for:
- Database sessions on an in-memory SQLite engine
- FastAPI test client with database and LLM dependencies overridden
- Recipe files on disk
- Factory functions for test data
"""
import os
import pytest
from datetime import date
from typing import Generator
from unittest.mock import MagicMock

# Set test environment variables BEFORE importing app modules
# This keeps Settings away from PostgreSQL and real API keys
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")
os.environ.setdefault("OPENAI_API_KEY", "")

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from recipebox.db.database import Base, get_db
from recipebox.db.models import Ingredient, Recipe
from recipebox.api.dependencies import get_llm_client
from recipebox.clients.openai_client import OpenAIClient
from recipebox.engine.parsing import ParsedRecipe
from recipebox.services.recipe_service import RecipeService
from recipebox.main import app


SAMPLE_RECIPES = """Pancakes
Ingredients:
Flour
Milk
Eggs
Instructions:
Mix ingredients
Cook on griddle

Tea
Ingredients:
Tea leaves
Water
Instructions:
Boil water
Steep leaves
"""


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database for testing.

    Each test function gets a fresh database.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a database session for testing."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def llm_client() -> MagicMock:
    """A stand-in for the OpenAI client that returns a canned reply."""
    client = MagicMock(spec=OpenAIClient)
    client.complete.return_value = "Try the Pancakes: you have flour, milk and eggs."
    return client


@pytest.fixture(scope="function")
def client(db_session, llm_client) -> Generator[TestClient, None, None]:
    """Create FastAPI test client with database and LLM dependency overrides."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_llm_client] = lambda: llm_client

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ============================================================================
# Recipe File Fixtures
# ============================================================================

@pytest.fixture
def recipe_file(tmp_path):
    """Write the two-recipe sample file and return its path."""
    path = tmp_path / "my_fav_recipes.txt"
    path.write_text(SAMPLE_RECIPES, encoding="utf-8")
    return path


@pytest.fixture
def write_recipe_file(tmp_path):
    """Return a helper that writes arbitrary content to a recipe file."""
    def _write(content: str, name: str = "recipes.txt"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# ============================================================================
# Stored Data Fixtures
# ============================================================================

@pytest.fixture
def test_recipe(db_session) -> Recipe:
    """Create a test recipe."""
    recipe = Recipe(
        name="Pancakes",
        ingredients=["Flour", "Milk", "Eggs"],
        instructions="Mix ingredients\nCook on griddle",
        taste="sweet",
        cuisine="American",
        prep_time=20,
    )
    db_session.add(recipe)
    db_session.commit()
    db_session.refresh(recipe)
    return recipe


@pytest.fixture
def test_recipes(db_session) -> list[Recipe]:
    """Create multiple test recipes."""
    recipes = [
        Recipe(
            name="Pancakes",
            ingredients=["Flour", "Milk", "Eggs"],
            instructions="Mix ingredients\nCook on griddle",
            taste="sweet",
            cuisine="American",
            prep_time=20,
        ),
        Recipe(
            name="Miso Soup",
            ingredients=["Miso paste", "Tofu", "Water"],
            instructions="Heat water\nDissolve miso\nAdd tofu",
            taste="savory",
            cuisine="Japanese",
            prep_time=10,
        ),
        Recipe(
            name="Tea",
            ingredients=["Tea leaves", "Water"],
            instructions="Boil water\nSteep leaves",
            taste="",
            cuisine="",
            prep_time=0,
        ),
    ]
    for recipe in recipes:
        db_session.add(recipe)
        db_session.commit()
    for recipe in recipes:
        db_session.refresh(recipe)
    return recipes


@pytest.fixture
def test_ingredients(db_session) -> list[Ingredient]:
    """Create test ingredients."""
    items = [
        Ingredient(name="Flour", quantity="500", unit="g", expiry_date=date(2026, 12, 31)),
        Ingredient(name="Milk", quantity="1", unit="l", expiry_date=date(2026, 10, 25)),
        Ingredient(name="Eggs", quantity="6", unit=None, expiry_date=None),
    ]
    for item in items:
        db_session.add(item)
        db_session.commit()
    for item in items:
        db_session.refresh(item)
    return items


# ============================================================================
# Recipe factory
# ============================================================================

class RecipeFactory:
    """Stores recipes through RecipeService, numbering unnamed ones."""

    def __init__(self, db_session: Session):
        self.service = RecipeService(db_session)
        self.created = 0

    def create(self, name: str = None, **fields) -> Recipe:
        """Store one recipe with a salted two-step default body."""
        self.created += 1
        fields.setdefault("ingredients", ["Salt"])
        fields.setdefault("instructions", "Cook\nServe")
        fields.setdefault("prep_time", 15)
        record = ParsedRecipe(name=name or f"Test Recipe {self.created}", **fields)
        return self.service.create(record)


@pytest.fixture
def recipe_factory(db_session) -> RecipeFactory:
    return RecipeFactory(db_session)

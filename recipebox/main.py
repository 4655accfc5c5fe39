"""
RecipeBox FastAPI application.

Wires the ingredient, recipe and chat routers into one app, creates the
tables on startup and exposes the service and health endpoints.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from recipebox.api.dependencies import get_llm_client
from recipebox.api.routes import chat, ingredients, recipes
from recipebox.clients.openai_client import OpenAIClient
from recipebox.config import settings
from recipebox.db.database import create_tables, get_db

logging.basicConfig(
    level=settings.log_level_value,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables when configured to, then serve."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    if settings.create_tables_on_startup:
        try:
            create_tables()
        except SQLAlchemyError as e:
            logger.error(f"Could not create database tables: {e}")

    yield

    logger.info(f"Stopping {settings.app_name}")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Recipe and ingredient storage with a recipe file importer and cooking assistant chat",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for module in (ingredients, recipes, chat):
    app.include_router(module.router)


@app.get("/")
async def root():
    """Service name, version and where to find the API docs."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
        "docs": app.docs_url,
    }


@app.get("/health")
async def health_check(
    db: Session = Depends(get_db),
    llm: OpenAIClient = Depends(get_llm_client),
):
    """
    Report database connectivity and whether the cooking assistant has an API key.

    The service counts as unhealthy only when the database is unreachable;
    a missing API key just disables chat.
    """
    report = {
        "version": settings.app_version,
        "database": "healthy",
        "llm": "configured" if llm.is_configured else "not_configured",
    }

    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning(f"Health check could not reach the database: {e}")
        report["database"] = "unhealthy"
        report["database_error"] = str(e)

    report["status"] = report["database"]
    return report


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("recipebox.main:app", host="0.0.0.0", port=8000, reload=settings.debug)

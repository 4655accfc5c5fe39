"""
CLI interface for RecipeBox: database setup, recipe file import and chat.
"""
import click
import json
from pathlib import Path

from recipebox.engine.parsing import TextRecipeParser
from recipebox.errors import RecipeBoxError
from recipebox.services.ingestion_service import read_text_file, resolve_path
from recipebox.config import settings


def _fail(error: RecipeBoxError):
    """Abort the command with the error message and a non-zero exit status."""
    raise click.ClickException(f"{error.message} [{error.error_code.value}]")


@click.group()
def cli():
    """RecipeBox - recipes, ingredients and a cooking assistant"""


@cli.command("init-db")
def init_db():
    """Create the database tables."""
    from recipebox.db.database import create_tables

    create_tables()
    click.echo("✓ Database tables created")


@cli.command()
@click.argument("file_path")
@click.option("--json", "as_json", is_flag=True, help="Print the parsed recipes as JSON")
def parse(file_path: str, as_json: bool):
    """Parse a recipe file without saving anything."""
    try:
        path = resolve_path(file_path)
        content = read_text_file(path, settings.ingest_file_encoding)
    except RecipeBoxError as e:
        _fail(e)

    recipes = TextRecipeParser().parse(content)

    if as_json:
        click.echo(json.dumps([recipe.to_dict() for recipe in recipes], indent=2))
        return

    click.echo(f"\n📄 {Path(path).name}: {len(recipes)} recipe(s)\n")
    for recipe in recipes:
        click.echo("=" * 60)
        click.echo(recipe.name)
        click.echo("-" * 60)
        click.echo(f"Ingredients ({len(recipe.ingredients)}):")
        for ingredient in recipe.ingredients:
            click.echo(f"  • {ingredient}")
        if recipe.instructions:
            click.echo("Instructions:")
            for number, step in enumerate(recipe.instructions.split("\n"), start=1):
                click.echo(f"  {number}. {step}")
        click.echo()


@cli.command()
@click.argument("file_path")
def ingest(file_path: str):
    """Parse a recipe file and save every recipe in it."""
    from recipebox.db.database import SessionLocal
    from recipebox.services.ingestion_service import RecipeIngestionService
    from recipebox.services.recipe_service import RecipeService

    db = SessionLocal()
    try:
        service = RecipeIngestionService(store=RecipeService(db))
        result = service.ingest_file(file_path)
    except RecipeBoxError as e:
        _fail(e)
    finally:
        db.close()

    click.echo(f"✓ {result.message}")
    for recipe in result.records:
        click.echo(f"  • {recipe.name} ({recipe.id})")


@cli.command()
@click.argument("message")
def chat(message: str):
    """Ask the cooking assistant for recipe suggestions."""
    from recipebox.clients.openai_client import OpenAIClient
    from recipebox.db.database import SessionLocal
    from recipebox.services.chat_service import ChatService

    db = SessionLocal()
    try:
        reply = ChatService(db, OpenAIClient()).suggest(message)
    except RecipeBoxError as e:
        _fail(e)
    finally:
        db.close()

    click.echo(reply)


if __name__ == "__main__":
    cli()

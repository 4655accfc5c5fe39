"""
Recipe file ingestion service.

Reads a plain-text recipe file, parses it into recipe records and stores
them with a single bulk insert.
"""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from recipebox.config import settings
from recipebox.db.models import Recipe as DBRecipe
from recipebox.engine.parsing import RecipeParser, TextRecipeParser
from recipebox.errors import FileReadError, PathResolutionError
from recipebox.services.recipe_service import RecipeStore

logger = logging.getLogger(__name__)


def resolve_path(file_path: str) -> Path:
    """
    Turn a user-supplied path into an absolute path.

    Raises:
        PathResolutionError: If the path is empty or the OS rejects it
    """
    if not file_path or not file_path.strip():
        raise PathResolutionError(file_path or "", "path is empty")
    if "\x00" in file_path:
        raise PathResolutionError(file_path, "path contains a NUL byte")

    try:
        return Path(file_path).expanduser().resolve()
    except (OSError, ValueError, RuntimeError) as e:
        raise PathResolutionError(file_path, str(e)) from e


def read_text_file(path: Path, encoding: str = "utf-8") -> str:
    """
    Read the whole file as text.

    Raises:
        FileReadError: With reason not_found, permission, not_a_file or decode
    """
    try:
        return path.read_text(encoding=encoding)
    except FileNotFoundError as e:
        raise FileReadError(str(path), FileReadError.NOT_FOUND) from e
    except PermissionError as e:
        raise FileReadError(str(path), FileReadError.PERMISSION) from e
    except IsADirectoryError as e:
        raise FileReadError(str(path), FileReadError.NOT_A_FILE) from e
    except UnicodeDecodeError as e:
        raise FileReadError(
            str(path),
            FileReadError.DECODE,
            message=f"Cannot decode recipe file '{path}' as {encoding}: {e.reason}",
        ) from e
    except OSError as e:
        raise FileReadError(str(path), FileReadError.NOT_A_FILE, message=f"Cannot read recipe file '{path}': {e}") from e


@dataclass
class IngestionResult:
    """Outcome of a successful ingestion."""

    path: Path
    records: List[DBRecipe] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def message(self) -> str:
        return f"Successfully parsed and saved {self.count} recipes"


class RecipeIngestionService:
    """
    Orchestrates path resolution, file reading, parsing and bulk persistence.

    Collaborators are injected so the pipeline can run against any store,
    file reader or parser.

    Example:
        >>> service = RecipeIngestionService(RecipeService(db))
        >>> result = service.ingest_file("./data/my_fav_recipes.txt")
        >>> result.count
        2
    """

    def __init__(
        self,
        store: RecipeStore,
        parser: Optional[RecipeParser] = None,
        reader: Callable[[Path, str], str] = read_text_file,
        encoding: Optional[str] = None,
    ):
        self.store = store
        self.parser = parser or TextRecipeParser()
        self.reader = reader
        self.encoding = encoding or settings.ingest_file_encoding

    def ingest_file(self, file_path: str) -> IngestionResult:
        """
        Parse a recipe file and store every recipe in it.

        Any failure aborts the whole ingestion; nothing is stored unless the
        full batch is accepted.

        Args:
            file_path: Relative or absolute path to the recipe file

        Returns:
            IngestionResult with the persisted recipes

        Raises:
            PathResolutionError: If the path cannot be resolved
            FileReadError: If the file cannot be read as text
            ValidationError: If a parsed recipe has no name
            PersistenceError: If the database rejects the batch
        """
        path = resolve_path(file_path)
        logger.info(f"Ingesting recipe file {path}")

        content = self.reader(path, self.encoding)
        recipes = self.parser.parse(content)
        logger.debug(f"Parsed {len(recipes)} recipe(s) from {path}")

        saved = self.store.insert_many(recipes)
        logger.info(f"Saved {len(saved)} recipe(s) from {path}")

        return IngestionResult(path=path, records=list(saved))

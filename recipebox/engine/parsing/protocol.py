"""
Protocol definition for recipe parsers.

Defines the interface the ingestion service depends on.
"""

from typing import List, Protocol

from recipebox.engine.parsing.models import ParsedRecipe


class RecipeParser(Protocol):
    """
    Protocol for recipe file parsers.

    The ingestion service only needs ``parse``, so alternative file formats
    can be plugged in without touching it.
    """

    def parse(self, content: str) -> List[ParsedRecipe]:
        """
        Parse the full text of a recipe file.

        Args:
            content: File content as text.

        Returns:
            One ParsedRecipe per recipe found, in file order.
        """
        ...

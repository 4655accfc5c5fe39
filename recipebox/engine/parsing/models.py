"""
Data models for recipe text parsing.

Contains the section state used while walking a recipe block and the
ParsedRecipe dataclass handed to persistence.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List


class Section(str, Enum):
    """Which part of a recipe block the extractor is currently reading."""

    NONE = "none"
    INGREDIENTS = "ingredients"
    INSTRUCTIONS = "instructions"


@dataclass
class ExtractedFields:
    """Raw fields pulled out of one block before normalization."""

    name: str
    ingredients: List[str] = field(default_factory=list)
    instructions: List[str] = field(default_factory=list)


@dataclass
class ParsedRecipe:
    """
    Canonical recipe record produced by the text parser.

    Example:
        >>> recipe = ParsedRecipe(
        ...     name="Tea",
        ...     ingredients=["Tea leaves", "Water"],
        ...     instructions="Boil water\\nSteep leaves",
        ... )
    """

    name: str
    ingredients: List[str] = field(default_factory=list)
    instructions: str = ""
    taste: str = ""
    cuisine: str = ""
    prep_time: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Column values for the recipes table."""
        return asdict(self)

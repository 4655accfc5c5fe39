"""
Recipe text parsing module.

Turns a plain-text recipe file into ParsedRecipe records in three stages:
1. split_blocks - one block per recipe, separated by blank lines
2. extract_fields - section-header state machine over the lines of a block
3. normalize - joined instructions plus default values

TextRecipeParser chains the stages and implements the RecipeParser protocol.
"""

from recipebox.engine.parsing.models import ExtractedFields, ParsedRecipe, Section
from recipebox.engine.parsing.protocol import RecipeParser
from recipebox.engine.parsing.segmenter import split_blocks, split_lines
from recipebox.engine.parsing.extractor import HEADER_TRANSITIONS, extract_fields
from recipebox.engine.parsing.normalizer import normalize
from recipebox.engine.parsing.text import TextRecipeParser

__all__ = [
    # Core models
    "ExtractedFields",
    "ParsedRecipe",
    "Section",
    # Protocol
    "RecipeParser",
    # Stages
    "split_blocks",
    "split_lines",
    "extract_fields",
    "normalize",
    "HEADER_TRANSITIONS",
    # Parsers
    "TextRecipeParser",
]

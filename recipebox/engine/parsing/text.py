"""
Plain-text recipe file parser.

File format:
    Pancakes
    Ingredients:
    Flour
    Milk
    Instructions:
    Mix ingredients
    Cook on griddle

    Tea
    ...

Recipes are separated by blank lines. Within a recipe the first line is the
name; ``Ingredients:`` and ``Instructions:`` headers (any case) open sections
with one entry per line.
"""

import logging
from typing import Iterator, List

from recipebox.engine.parsing.extractor import extract_fields
from recipebox.engine.parsing.models import ParsedRecipe
from recipebox.engine.parsing.normalizer import normalize
from recipebox.engine.parsing.segmenter import split_blocks, split_lines

logger = logging.getLogger(__name__)


class TextRecipeParser:
    """
    Segmenter, extractor and normalizer chained together.

    Blocks that are empty after trimming are skipped, so trailing blank
    lines in a file never turn into nameless recipes.
    """

    def iter_recipes(self, content: str) -> Iterator[ParsedRecipe]:
        """Lazily yield one ParsedRecipe per non-empty block."""
        for index, block in enumerate(split_blocks(content)):
            if not block:
                logger.debug(f"Skipping empty block #{index}")
                continue
            yield normalize(extract_fields(split_lines(block)))

    def parse(self, content: str) -> List[ParsedRecipe]:
        """Parse every recipe in ``content``."""
        return list(self.iter_recipes(content))

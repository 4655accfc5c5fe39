"""
Split recipe file content into one text block per recipe, and a block
into its lines.

Recipes are separated by a blank line. Only ``\\n`` and ``\\r\\n`` end a
line; form feeds and Unicode separators stay part of the text.
"""

import re
from typing import Iterator, List

_BLANK_LINE = re.compile(r"\r?\n\r?\n")
_LINE_BREAK = re.compile(r"\r?\n")


def split_blocks(content: str) -> Iterator[str]:
    """
    Lazily yield the trimmed text of every recipe block in ``content``.

    Empty blocks are yielded as ``""``; callers decide whether to skip them.
    An empty string yields a single empty block.
    """
    for chunk in _BLANK_LINE.split(content):
        yield chunk.strip()


def split_lines(block: str) -> List[str]:
    """Lines of one block, split on line breaks only."""
    return _LINE_BREAK.split(block)

"""
Section-header field extractor for a single recipe block.

The first line of a block is always the recipe name. Every later line is
classified by an explicit state machine: header lines switch the current
section, other non-empty lines are collected into whichever section is active.
Lines read before any header are dropped.
"""

from typing import Dict, Iterable, List

from recipebox.engine.parsing.models import ExtractedFields, Section

# Header line (lowercased) -> section it opens
HEADER_TRANSITIONS: Dict[str, Section] = {
    "ingredients:": Section.INGREDIENTS,
    "instructions:": Section.INSTRUCTIONS,
}


def next_section(current: Section, line: str) -> Section:
    """Return the section after reading ``line`` (already trimmed)."""
    return HEADER_TRANSITIONS.get(line.lower(), current)


def is_header(line: str) -> bool:
    return line.lower() in HEADER_TRANSITIONS


def extract_fields(lines: Iterable[str]) -> ExtractedFields:
    """
    Classify the lines of one block into name, ingredients and instructions.

    Args:
        lines: Lines of a trimmed block, in order.

    Returns:
        ExtractedFields with the name taken verbatim from the first line.
    """
    iterator = iter(lines)
    name = next(iterator, "")
    collected: Dict[Section, List[str]] = {
        Section.INGREDIENTS: [],
        Section.INSTRUCTIONS: [],
    }

    section = Section.NONE
    for raw_line in iterator:
        line = raw_line.strip()
        if is_header(line):
            section = next_section(section, line)
            continue
        if line and section in collected:
            collected[section].append(line)

    return ExtractedFields(
        name=name,
        ingredients=collected[Section.INGREDIENTS],
        instructions=collected[Section.INSTRUCTIONS],
    )

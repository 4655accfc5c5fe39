"""
Turn extracted fields into a ParsedRecipe with default values.
"""

from recipebox.engine.parsing.models import ExtractedFields, ParsedRecipe

INSTRUCTION_SEPARATOR = "\n"


def normalize(fields: ExtractedFields) -> ParsedRecipe:
    """Join instruction lines and fill in the fields the text format lacks."""
    return ParsedRecipe(
        name=fields.name,
        ingredients=list(fields.ingredients),
        instructions=INSTRUCTION_SEPARATOR.join(fields.instructions),
        taste="",
        cuisine="",
        prep_time=0,
    )

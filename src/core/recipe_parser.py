"""Recipe submission parsing (core domain)."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple
from urllib.parse import urlsplit

from core.errors import NameEmpty, PhotoEmpty
from core.models import Recipe

SECTION_PHOTO = "photo:"
SECTION_NAME = "name:"
SECTION_INSTRUCTIONS = "instructions:"
SECTION_DESCRIPTION = "description:"

SECTION_DELIMITER = "==="

# Fixed search order; also the field each label fills.
SECTIONS: List[Tuple[str, str]] = [
    (SECTION_PHOTO, "photo_url"),
    (SECTION_NAME, "name"),
    (SECTION_INSTRUCTIONS, "instructions"),
    (SECTION_DESCRIPTION, "description"),
]


def _find_section(paragraph: str, pending: List[Tuple[str, str]]) -> Optional[Tuple[int, str, str]]:
    """Return (index, label, field) of the earliest pending label in the paragraph."""

    found: Optional[Tuple[int, str, str]] = None
    for label, field in pending:
        idx = paragraph.find(label)
        if idx == -1:
            continue
        if found is None or idx < found[0]:
            found = (idx, label, field)
    return found


def parse_recipe_text(text: str) -> Recipe:
    """Parse a submission into a validated Recipe.

    Expected format (sections may come in any order):

        photo: <photo url>
        ===
        name: <recipe name>
        ===
        instructions: <cooking instructions>
        ===
        description: <description>

    Parsing is best effort:
    - Each paragraph between delimiters fills at most one section.
    - A section is filled once; later repeats of the same label are ignored.
    - Text outside labeled sections (such as the /add command) is dropped.
    - Only name and photo are enforced, see validate_recipe.
    """

    values: Dict[str, str] = {field: "" for _, field in SECTIONS}
    pending = list(SECTIONS)

    paragraphs = text.split(SECTION_DELIMITER)
    i = 0
    while pending and i < len(paragraphs):
        paragraph = paragraphs[i]
        i += 1

        found = _find_section(paragraph, pending)
        if found is None:
            continue

        idx, label, field = found
        values[field] = paragraph[idx + len(label):].strip()
        pending.remove((label, field))

    recipe = Recipe(**values)
    validate_recipe(recipe)
    return recipe


def validate_recipe(recipe: Recipe) -> None:
    """Raise NameEmpty or PhotoEmpty; the name is checked first."""

    if not recipe.name:
        raise NameEmpty()
    if not recipe.photo_url or not is_url(recipe.photo_url):
        raise PhotoEmpty()


def is_url(text: str) -> bool:
    """Return True for an absolute URL with a non-empty host."""

    try:
        parts = urlsplit(text)
        hostname = parts.hostname
    except ValueError:
        return False
    return bool(parts.scheme) and bool(hostname)

"""Blank-space extractor.

Derives the ordered list of blank spaces from markup. The markup is the
only source of truth; the list is a disposable projection and is rebuilt
from scratch on every call.
"""

import re

from docfill.core.exceptions import NotFoundError
from docfill.strategies.blank_space.markers import (
    MARKER_PATTERN,
    is_filled,
    marker_pattern_for,
)
from docfill.strategies.blank_space.models import (
    BlankSpace,
    EmptyBlankSpace,
    FilledBlankSpace,
)


def _to_blank_space(match: re.Match[str]) -> BlankSpace:
    blank_id = match.group("id")
    length = int(match.group("length"))
    inner = match.group("inner")

    if is_filled(match.group("suffix"), inner):
        return FilledBlankSpace(
            id=blank_id, position=match.start(), length=length, content=inner
        )
    return EmptyBlankSpace(id=blank_id, position=match.start(), length=length)


def extract(markup: str) -> list[BlankSpace]:
    """Return every blank space in ``markup``, in document order."""
    return [_to_blank_space(match) for match in MARKER_PATTERN.finditer(markup)]


def find_blank_space(markup: str, blank_id: str) -> BlankSpace:
    """Locate a single blank space by id.

    Raises:
        NotFoundError: If no marker carries ``blank_id``.
    """
    match = marker_pattern_for(blank_id).search(markup)
    if match is None:
        raise NotFoundError(f"Blank space not found: {blank_id}", blank_id)
    return _to_blank_space(match)


def adjacent_blank_space(
    blank_spaces: list[BlankSpace], blank_id: str, step: int
) -> BlankSpace | None:
    """Return the blank space ``step`` places away from ``blank_id``.

    Navigation does not wrap around: stepping past either end yields None.

    Raises:
        NotFoundError: If ``blank_id`` is not in ``blank_spaces``.
    """
    for index, blank_space in enumerate(blank_spaces):
        if blank_space.id == blank_id:
            target = index + step
            if 0 <= target < len(blank_spaces):
                return blank_spaces[target]
            return None
    raise NotFoundError(f"Blank space not found: {blank_id}", blank_id)

"""Blank-space mutator.

Pure string transforms over markup: fill an existing marker or splice a
new empty one in at the caret. Callers re-extract afterwards and must not
run two mutations against the same document concurrently.
"""

import logging
import re

from docfill.core.exceptions import InvalidPositionError, NotFoundError
from docfill.strategies.blank_space.markers import (
    EMPTY_GLYPH,
    FILLED_TOKEN,
    MARKER_PATTERN,
    BlankSpaceIdGenerator,
    marker_pattern_for,
    render_empty_marker,
    render_marker,
)
from docfill.strategies.blank_space.models import EmptyBlankSpace, InsertResult

logger = logging.getLogger(__name__)

DEFAULT_INSERT_WIDTH = 10

TAG_PATTERN = re.compile(r"</?[A-Za-z][^<>]*>")


def _snap_out_of_spans(markup: str, position: int) -> int:
    """Move a caret that falls strictly inside a marker or a tag to its end."""
    for pattern in (MARKER_PATTERN, TAG_PATTERN):
        for match in pattern.finditer(markup):
            if match.start() >= position:
                break
            if position < match.end():
                return match.end()
    return position


def fill(markup: str, blank_id: str, text: str) -> str:
    """Replace the inner text of marker ``blank_id`` and mark it filled.

    ``data-length`` keeps the original width. Filling with an empty string
    clears the blank back to its period rendering.

    Args:
        markup: Current document markup.
        blank_id: Id of the marker to fill.
        text: Fill text, emitted verbatim.

    Returns:
        The new markup.

    Raises:
        NotFoundError: If no marker carries ``blank_id``.
    """
    match = marker_pattern_for(blank_id).search(markup)
    if match is None:
        raise NotFoundError(f"Blank space not found: {blank_id}", blank_id)

    length = int(match.group("length"))
    tokens = [t for t in match.group("suffix").split() if t != FILLED_TOKEN]

    if text:
        inner = text
        tokens.append(FILLED_TOKEN)
    else:
        inner = EMPTY_GLYPH * length

    replacement = render_marker(blank_id, length, inner, tokens, match.group("attrs"))
    logger.debug(f"Filled blank space {blank_id} ({len(text)} chars)")

    return markup[:match.start()] + replacement + markup[match.end():]


def insert(markup: str, position: int, width: int = DEFAULT_INSERT_WIDTH) -> InsertResult:
    """Splice a new empty marker into ``markup`` at ``position``.

    A caret inside an existing marker or tag is moved to just after it,
    so the surrounding markup stays intact and the blank count grows by
    exactly one. The returned blank space records the adjusted position.

    Args:
        markup: Current document markup.
        position: Caret offset, ``0 <= position <= len(markup)``.
        width: Logical width of the new blank.

    Returns:
        The new markup together with the created blank space.

    Raises:
        InvalidPositionError: If ``position`` is out of range.
    """
    if position < 0 or position > len(markup):
        raise InvalidPositionError(position, len(markup))

    position = _snap_out_of_spans(markup, position)
    blank_id = BlankSpaceIdGenerator()()
    marker = render_empty_marker(blank_id, width)
    logger.debug(f"Inserted blank space {blank_id} at {position}")

    return InsertResult(
        markup=markup[:position] + marker + markup[position:],
        blank_space=EmptyBlankSpace(id=blank_id, position=position, length=width),
    )

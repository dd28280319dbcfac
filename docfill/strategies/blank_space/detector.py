"""Blank-space pattern detector.

Scans raw markup for placeholder-looking runs and rewrites each one as a
blank-space marker. Patterns run in a fixed order and each pattern sees
the output of the previous one, so the order below is part of the
behaviour.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from docfill.strategies.blank_space.markers import (
    MARKER_PATTERN,
    BlankSpaceIdGenerator,
    render_empty_marker,
    render_filled_marker,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetectionPattern:
    """A placeholder recognizer paired with the marker it renders.

    Attributes:
        name: Short label used in logs.
        regex: Compiled expression. Group 1, when present, is the
            interior text kept as fill text.
    """

    name: str
    regex: re.Pattern[str]

    def render(self, match: re.Match[str], next_id: Callable[[], str]) -> str:
        length = len(match.group(0))
        text = match.group(1) if self.regex.groups else None

        if text and text.strip():
            return render_filled_marker(next_id(), length, text)
        return render_empty_marker(next_id(), length)


DETECTION_PATTERNS: tuple[DetectionPattern, ...] = (
    DetectionPattern("underscores", re.compile(r"_{3,}")),
    DetectionPattern("dots", re.compile(r"\.{3,}")),
    DetectionPattern("brackets", re.compile(r"\[([^\]]*)\]")),
    DetectionPattern("curly", re.compile(r"\{\{([^}]*)\}\}")),
    DetectionPattern("underscores_with_text", re.compile(r"__+([^_]*)__+")),
    DetectionPattern("empty_parentheses", re.compile(r"\(\s*\)")),
)


def _substitute_outside_markers(
    markup: str,
    pattern: DetectionPattern,
    next_id: Callable[[], str],
) -> tuple[str, int]:
    """Apply one pattern to every stretch of markup between markers.

    Markers already present are copied through untouched, so a pattern
    can never match inside (or across) a marker.
    """
    pieces: list[str] = []
    total = 0
    cursor = 0

    def replace(match: re.Match[str]) -> str:
        return pattern.render(match, next_id)

    for marker in MARKER_PATTERN.finditer(markup):
        segment, n = pattern.regex.subn(replace, markup[cursor:marker.start()])
        pieces.append(segment)
        pieces.append(marker.group(0))
        total += n
        cursor = marker.end()

    segment, n = pattern.regex.subn(replace, markup[cursor:])
    pieces.append(segment)
    total += n

    return "".join(pieces), total


def detect(markup: str) -> str:
    """Rewrite placeholder runs in ``markup`` as blank-space markers.

    Runs of three or more underscores or periods, square-bracketed and
    double-curly spans, ``__text__`` spans and empty parentheses are
    recognized, in that order. Spans with non-blank interior text become
    filled markers holding that text; everything else becomes an empty
    marker of the match's width.

    Args:
        markup: Raw markup, possibly already containing markers.

    Returns:
        The rewritten markup.
    """
    next_id = BlankSpaceIdGenerator()
    detected = 0

    for pattern in DETECTION_PATTERNS:
        markup, n = _substitute_outside_markers(markup, pattern, next_id)
        if n:
            logger.debug(f"Pattern '{pattern.name}' converted {n} blank spaces")
        detected += n

    logger.info(f"Blank-space detection complete: {detected} markers emitted")
    return markup

"""Blank-space marker grammar.

Markers are the tagged spans that make a blank space addressable inside
markup::

    <span class="blank-space[ filled]" data-id="<id>" data-length="<n>"><inner></span>

An empty marker carries ``n`` periods as its inner text; a filled marker
carries the literal fill text.
"""

import re
import time
from itertools import count

MARKER_CLASS = "blank-space"
FILLED_TOKEN = "filled"
EMPTY_GLYPH = "."
UNFILLED_GLYPH = "_"


def _marker_regex(id_pattern: str) -> re.Pattern[str]:
    return re.compile(
        rf'<span class="{MARKER_CLASS}(?P<suffix>[^"]*)"'
        rf' data-id="(?P<id>{id_pattern})"'
        r' data-length="(?P<length>\d+)"'
        r"(?P<attrs>[^>]*)>(?P<inner>.*?)</span>",
        re.DOTALL,
    )


MARKER_PATTERN = _marker_regex(r'[^"]*')


def marker_pattern_for(blank_id: str) -> re.Pattern[str]:
    """Return an expression matching only the marker with ``blank_id``."""
    return _marker_regex(re.escape(blank_id))


def is_filled(class_suffix: str, inner: str) -> bool:
    """A marker is filled iff it has the filled token and non-empty text."""
    return FILLED_TOKEN in class_suffix.split() and inner != ""


def render_marker(
    blank_id: str,
    length: int,
    inner: str,
    class_tokens: list[str] | None = None,
    extra_attrs: str = "",
) -> str:
    """Render a marker span.

    Args:
        blank_id: The marker id.
        length: Logical width recorded in ``data-length``.
        inner: Inner text, emitted verbatim.
        class_tokens: Class tokens after ``blank-space``.
        extra_attrs: Any further attributes, emitted verbatim after
            ``data-length``.
    """
    css_class = " ".join([MARKER_CLASS, *(class_tokens or [])])
    return (
        f'<span class="{css_class}" data-id="{blank_id}" '
        f'data-length="{length}"{extra_attrs}>{inner}</span>'
    )


def render_empty_marker(blank_id: str, length: int) -> str:
    return render_marker(blank_id, length, EMPTY_GLYPH * length)


def render_filled_marker(blank_id: str, length: int, text: str) -> str:
    return render_marker(blank_id, length, text, [FILLED_TOKEN])


# =============================================================================
# Identity
# =============================================================================

_last_seed = 0


def next_seed() -> int:
    """Return a millisecond time seed, strictly increasing per process.

    Two detection passes within the same millisecond get distinct seeds,
    so their ids can never collide.
    """
    global _last_seed
    now = time.time_ns() // 1_000_000
    _last_seed = max(now, _last_seed + 1)
    return _last_seed


class BlankSpaceIdGenerator:
    """Mints ``blank_<seed>_<n>`` ids for a single detection or insert pass."""

    def __init__(self, seed: int | None = None) -> None:
        self._seed = next_seed() if seed is None else seed
        self._counter = count(1)

    def __call__(self) -> str:
        return f"blank_{self._seed}_{next(self._counter)}"

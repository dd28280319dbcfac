"""Blank resolution and paragraph segmentation shared by exporters."""

import html
import re
from dataclasses import dataclass

from docfill.strategies.blank_space.markers import MARKER_PATTERN, UNFILLED_GLYPH, is_filled

BLOCK_PATTERN = re.compile(
    r"<(?P<tag>p|h[1-6]|li)\b[^>]*>(?P<body>.*?)</(?P=tag)\s*>",
    re.DOTALL | re.IGNORECASE,
)
BREAK_PATTERN = re.compile(r"<br\s*/?>", re.IGNORECASE)
TAG_PATTERN = re.compile(r"</?[A-Za-z!][^>]*>")


@dataclass(frozen=True)
class TextBlock:
    """One output paragraph.

    Attributes:
        text: Bare text; may contain ``\\n`` line breaks.
        heading_level: 1-6 for headings, None otherwise.
        list_item: True for ``<li>`` blocks.
    """

    text: str
    heading_level: int | None = None
    list_item: bool = False


def strip_tags(markup: str) -> str:
    """Drop all tags, turning ``<br>`` into newlines and decoding entities."""
    text = BREAK_PATTERN.sub("\n", markup)
    text = TAG_PATTERN.sub("", text)
    return html.unescape(text)


def _blank_text(match: re.Match[str]) -> str:
    inner = match.group("inner")
    if is_filled(match.group("suffix"), inner):
        return inner
    return UNFILLED_GLYPH * int(match.group("length"))


def markup_to_text(markup: str) -> str:
    """Render markup as bare text with every blank space resolved.

    Only the markup around markers is stripped and entity-decoded. Fill
    text is emitted exactly as entered, and empty blanks become an
    underscore run of their width.
    """
    parts: list[str] = []
    cursor = 0
    for match in MARKER_PATTERN.finditer(markup):
        parts.append(strip_tags(markup[cursor:match.start()]))
        parts.append(_blank_text(match))
        cursor = match.end()
    parts.append(strip_tags(markup[cursor:]))
    return "".join(parts)


def _block_text(markup: str) -> str:
    text = markup_to_text(markup)
    # A lone trailing <br> is how editors mark an empty paragraph
    return text[:-1] if text.endswith("\n") else text


def _loose_lines(markup: str) -> list[TextBlock]:
    if not markup.strip():
        return []
    text = markup_to_text(markup)
    if not text.strip():
        return []
    return [TextBlock(line) for line in text.strip("\n").split("\n")]


def split_blocks(markup: str) -> list[TextBlock]:
    """Segment markup into paragraphs with blanks resolved per paragraph.

    Paragraph boundaries are ``<p>``, ``<h1>``-``<h6>`` and ``<li>``
    elements. Text between those elements is kept as extra paragraphs.
    Without any such element the stripped text is split on newlines.
    Empty paragraphs are preserved.
    """
    blocks: list[TextBlock] = []
    cursor = 0
    found = False

    for match in BLOCK_PATTERN.finditer(markup):
        found = True
        blocks.extend(_loose_lines(markup[cursor:match.start()]))

        tag = match.group("tag").lower()
        heading_level = int(tag[1]) if tag.startswith("h") else None
        blocks.append(
            TextBlock(
                text=_block_text(match.group("body")),
                heading_level=heading_level,
                list_item=tag == "li",
            )
        )
        cursor = match.end()

    if not found:
        text = markup_to_text(markup)
        return [TextBlock(line) for line in text.split("\n")]

    blocks.extend(_loose_lines(markup[cursor:]))
    return blocks

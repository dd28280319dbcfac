"""Blank-space engine.

Detects placeholder runs, extracts blank spaces from markers, and fills
or inserts markers in markup.
"""

from docfill.strategies.blank_space.detector import DETECTION_PATTERNS, detect
from docfill.strategies.blank_space.extractor import (
    adjacent_blank_space,
    extract,
    find_blank_space,
)
from docfill.strategies.blank_space.models import (
    BlankSpace,
    EmptyBlankSpace,
    FilledBlankSpace,
    InsertResult,
)
from docfill.strategies.blank_space.mutator import DEFAULT_INSERT_WIDTH, fill, insert

__all__ = [
    "DETECTION_PATTERNS",
    "DEFAULT_INSERT_WIDTH",
    "BlankSpace",
    "EmptyBlankSpace",
    "FilledBlankSpace",
    "InsertResult",
    "adjacent_blank_space",
    "detect",
    "extract",
    "fill",
    "find_blank_space",
    "insert",
]

"""Error taxonomy for the blank-space engine and its collaborators.

Every operation either fully succeeds or raises one of these without
touching the caller's state. Nothing here is retried internally.
"""


class DocfillError(Exception):
    """Base class for all docfill errors."""


class ParseError(DocfillError):
    """Source content could not be converted to markup at all."""


class UnsupportedContentError(DocfillError):
    """Source content kind is unknown or exceeds the configured limits."""


class NotFoundError(DocfillError):
    """A blank space, document or template id has no match."""

    def __init__(self, message: str, identifier: str | None = None) -> None:
        super().__init__(message)
        self.identifier = identifier


class InvalidPositionError(DocfillError):
    """A caret position lies outside the markup it refers to."""

    def __init__(self, position: int, length: int) -> None:
        super().__init__(
            f"Caret position {position} is outside the markup (0..{length})"
        )
        self.position = position
        self.length = length


class ConversionError(DocfillError):
    """An export could not serialize the resolved document."""

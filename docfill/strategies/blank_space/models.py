"""Blank-space domain models.

A blank space is either empty or filled. The two variants share ``id``,
``position`` and ``length``; only the filled variant carries ``content``
and only the empty one exposes a ``placeholder``.
"""

from typing import Annotated, Literal, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from docfill.strategies.blank_space.markers import UNFILLED_GLYPH


class _BlankSpaceBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Marker id, unique within the document")
    position: int = Field(ge=0, description="Offset of the opening tag in the markup")
    length: int = Field(ge=0, description="Logical width of the blank")


class EmptyBlankSpace(_BlankSpaceBase):
    """A blank space awaiting text."""

    kind: Literal["empty"] = "empty"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def filled(self) -> bool:
        return False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def placeholder(self) -> str:
        """Underscore run of the blank's width, for display."""
        return UNFILLED_GLYPH * self.length


class FilledBlankSpace(_BlankSpaceBase):
    """A blank space holding fill text."""

    kind: Literal["filled"] = "filled"
    content: str = Field(min_length=1, description="The literal fill text")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def filled(self) -> bool:
        return True


BlankSpace = Annotated[EmptyBlankSpace | FilledBlankSpace, Field(discriminator="kind")]


class InsertResult(NamedTuple):
    """New markup plus the blank space that was spliced into it."""

    markup: str
    blank_space: EmptyBlankSpace

"""Template engine domain models.

Pydantic models for named-variable templates. These live here, not in the
API layer, to avoid circular imports.
"""

from pydantic import BaseModel, Field, computed_field

from docfill.strategies.template_engine.substitution import extract_variables


class VariableTemplate(BaseModel):
    """A template whose placeholders are ``{{name}}`` tokens."""

    id: str = Field(description="Stable template identifier")
    name: str = Field(description="Human readable template name")
    content: str = Field(description="Template text with variable tokens")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def variables(self) -> list[str]:
        """Distinct variable names, in order of first occurrence."""
        return extract_variables(self.content)

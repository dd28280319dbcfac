"""Named-variable substitution.

Variable templates use ``{{name}}`` tokens. The name is everything between
the braces up to the first closing ``}}``, taken literally: whitespace and
punctuation are part of the name and nothing is trimmed. Extraction and
substitution share one expression so they always agree on what a name is.
"""

import logging
import re
from collections.abc import Mapping

logger = logging.getLogger(__name__)

VARIABLE_PATTERN = re.compile(r"\{\{(.*?)\}\}", re.DOTALL)


def extract_variables(content: str) -> list[str]:
    """Return distinct variable names in order of first occurrence.

    Example:
        >>> extract_variables("{{x}} {{y}} {{x}}")
        ['x', 'y']
    """
    return list(dict.fromkeys(VARIABLE_PATTERN.findall(content)))


def substitute(content: str, bindings: Mapping[str, str]) -> str:
    """Replace every bound ``{{name}}`` token with its value.

    Unbound tokens are left verbatim, so templates can be filled over
    several passes. Substituted values are not rescanned.

    Args:
        content: Template text.
        bindings: Variable name to replacement value.

    Returns:
        The substituted text.
    """
    replaced = 0

    def replace(match: re.Match[str]) -> str:
        nonlocal replaced
        name = match.group(1)
        if name in bindings:
            replaced += 1
            return str(bindings[name])
        return match.group(0)

    result = VARIABLE_PATTERN.sub(replace, content)
    logger.debug(f"Substituted {replaced} variable occurrences")
    return result


def variable_token(name: str) -> str:
    """Return the ``{{name}}`` token for ``name``, stripping stray braces."""
    clean_name = re.sub(r"[{}]", "", name).strip()
    return f"{{{{{clean_name}}}}}"


def promote_to_variable(content: str, selection: str, name: str) -> str:
    """Turn the first occurrence of ``selection`` into a variable token.

    Args:
        content: Template text.
        selection: Literal text to replace, e.g. a run of dots.
        name: Variable name; braces are stripped.

    Returns:
        The updated text, unchanged if ``selection`` does not occur.

    Raises:
        ValueError: If ``selection`` or the cleaned ``name`` is empty.
    """
    if not selection:
        raise ValueError("Selection must not be empty")

    token = variable_token(name)
    if token == "{{}}":
        raise ValueError("Variable name must not be empty")

    return content.replace(selection, token, 1)

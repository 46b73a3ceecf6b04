"""Documentation comment blocks for generated declarations."""

import textwrap
from typing import Any

COMMENT_WIDTH = 80


def begin_comment(indent: str) -> str:
    return f"{indent}/**"


def end_comment(indent: str) -> str:
    return f"{indent} */"


def wrap_comment(text: str, indent: str) -> str:
    """Word-wrap text into comment continuation lines, one paragraph per source line."""
    prefix = f"{indent} * "
    lines: list[str] = []

    for paragraph in text.replace("*/", "*\\/").splitlines() or [""]:
        wrapped = textwrap.wrap(paragraph, width=COMMENT_WIDTH, break_long_words=False, break_on_hyphens=False)
        if wrapped:
            lines.extend(prefix + line for line in wrapped)
        else:
            lines.append(prefix.rstrip())

    return "\n".join(lines)


def format_default_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_comment(
    description: str | None = None,
    is_deprecated: bool = False,
    deprecation_reason: str | None = None,
    default_value: Any = None,
    indent: str = "",
) -> str:
    """
    Render a comment block, or an empty string when there is nothing to document.

    Facets appear in this order, separated by a blank comment line: the
    ``@deprecated`` notice, the ``@default`` value, then the description.
    Any default other than None is documented, including falsy literals.

    Args:
        description: Free text description
        is_deprecated: Whether the element is deprecated
        deprecation_reason: Optional reason appended to ``@deprecated``
        default_value: Default value literal of an input value
        indent: Prefix for every line of the block

    Returns:
        str: The delimited comment block or ``""``
    """
    facets: list[str] = []

    if is_deprecated:
        facets.append(f"@deprecated {deprecation_reason}" if deprecation_reason else "@deprecated")

    if default_value is not None:
        facets.append(f"@default {format_default_value(default_value)}")

    if description:
        facets.append(description)

    if not facets:
        return ""

    lines = [begin_comment(indent)]
    for position, facet in enumerate(facets):
        if position:
            lines.append(wrap_comment("", indent))
        lines.append(wrap_comment(facet, indent))
    lines.append(end_comment(indent))

    return "\n".join(lines)


def comment_for(element: Any, indent: str = "") -> str:
    """Build the comment block for any introspection element exposing the usual attributes."""
    return build_comment(
        description=getattr(element, "description", None),
        is_deprecated=getattr(element, "is_deprecated", False),
        deprecation_reason=getattr(element, "deprecation_reason", None),
        default_value=getattr(element, "default_value", None),
        indent=indent,
    )

"""Token substitution for progress formats and messages."""

import re
from typing import Any, Mapping

TOKEN_PATTERN = re.compile(r":(\w+)")


def tokenize(template: str, tokens: Mapping[str, Any]) -> str:
    """Replace ``:name`` occurrences in a template with token values.

    Names are matched greedily, so ``:steps_remaining`` is never read as
    ``:step`` followed by text. Unknown names, and names whose value is
    ``None``, are left verbatim.

    Args:
        template: Format string such as ``":title |:progress_bar|"``
        tokens: Mapping of token name to display value

    Returns:
        The template with known tokens substituted
    """
    def replace(match: "re.Match[str]") -> str:
        value = tokens.get(match.group(1))
        if value is None:
            return match.group(0)
        return str(value)

    return TOKEN_PATTERN.sub(replace, template)

"""
Variable name cleanup.

Design tools restrict which characters may appear in a variable name.
"""

import re

from chuk_mcp_figma_tokens.constants import ALLOWED_NAME_PATTERN

_DISALLOWED = re.compile(ALLOWED_NAME_PATTERN)


def sanitize_name(name: str) -> str:
    """
    Strip characters outside letters, digits, spaces, hyphens and underscores.

    Tabs, newlines and other whitespace are stripped too.

    The result is trimmed; an empty string means the name is unusable.
    """
    return _DISALLOWED.sub("", name).strip()

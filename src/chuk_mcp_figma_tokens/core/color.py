"""
Hex color conversion.

Design tools store colors as fractional RGB channels in [0, 1],
while tokens are usually written as hex strings.
"""

from __future__ import annotations

import re

from chuk_mcp_figma_tokens.constants import ErrorMessages
from chuk_mcp_figma_tokens.models.color import RGB


HEX_DIGITS = re.compile(r"[0-9a-fA-F]{6}")


class InvalidHexColorError(ValueError):
    """Raised when a string is not a 3 or 6 digit hex color."""


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Convert a hex color string to fractional RGB.

    Accepts an optional leading '#' and either 3 or 6 hex digits.
    Shorthand is expanded by doubling each digit ('ABC' -> 'AABBCC').

    Args:
        hex_color: Hex color string (e.g., '#FF0000', 'f00')

    Returns:
        RGB with each channel in [0, 1]

    Raises:
        InvalidHexColorError: If the string has the wrong length or
            contains non-hex characters
    """
    digits = hex_color.replace("#", "", 1)

    if len(digits) == 3:
        digits = "".join(char * 2 for char in digits)

    if len(digits) != 6 or not HEX_DIGITS.fullmatch(digits):
        raise InvalidHexColorError(ErrorMessages.INVALID_HEX.format(hex=digits))

    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))

    return RGB(r=r / 255, g=g / 255, b=b / 255)


def rgb_to_hex(rgb: RGB) -> str:
    """Format fractional RGB as an uppercase '#RRGGBB' string."""
    return "#" + "".join(f"{round(channel * 255):02X}" for channel in (rgb.r, rgb.g, rgb.b))


def is_hex_color(value: object) -> bool:
    """Return True if value is a string that should be treated as a color token."""
    return isinstance(value, str) and value.startswith("#")

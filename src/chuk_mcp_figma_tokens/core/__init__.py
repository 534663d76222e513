"""
Core helpers for token import.

This module provides:
- hex_to_rgb / rgb_to_hex: Hex color conversion
- sanitize_name: Variable name cleanup
- infer_variable_type / process_value / resolve_value: Value typing
"""

from chuk_mcp_figma_tokens.core.color import (
    InvalidHexColorError,
    hex_to_rgb,
    is_hex_color,
    rgb_to_hex,
)
from chuk_mcp_figma_tokens.core.naming import sanitize_name
from chuk_mcp_figma_tokens.core.values import (
    infer_variable_type,
    process_value,
    resolve_value,
)

__all__ = [
    "InvalidHexColorError",
    "hex_to_rgb",
    "infer_variable_type",
    "is_hex_color",
    "process_value",
    "resolve_value",
    "rgb_to_hex",
    "sanitize_name",
]

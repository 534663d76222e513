"""
Token value typing.

A token's variable type is inferred from the native kind of its value:
hex strings become colors, numbers floats, booleans booleans, and
anything else is stored as a string.
"""

from __future__ import annotations

from typing import Any

from chuk_mcp_figma_tokens.constants import VariableType
from chuk_mcp_figma_tokens.core.color import hex_to_rgb, is_hex_color
from chuk_mcp_figma_tokens.models.variable import VariableValue


def infer_variable_type(value: Any) -> VariableType:
    """
    Infer the variable type for a raw token value.

    bool is checked before numbers since it is a subclass of int.
    """
    if is_hex_color(value):
        return VariableType.COLOR
    if isinstance(value, bool):
        return VariableType.BOOLEAN
    if isinstance(value, int | float):
        return VariableType.FLOAT
    return VariableType.STRING


def process_value(value: Any) -> tuple[VariableType, VariableValue]:
    """
    Infer a value's type and convert it to what the host stores.

    Raises:
        InvalidHexColorError: If a '#' string is not a valid hex color
    """
    variable_type = infer_variable_type(value)

    if variable_type == VariableType.COLOR:
        return variable_type, hex_to_rgb(value)
    if variable_type == VariableType.BOOLEAN:
        return variable_type, value
    if variable_type == VariableType.FLOAT:
        return variable_type, float(value)
    return variable_type, str(value)


def resolve_value(
    raw_value: Any,
    processed_value: VariableValue,
    target_type: VariableType,
) -> VariableValue:
    """
    Pick the value to write into a variable that may already exist.

    An existing COLOR variable always receives the hex conversion of a
    '#' string; every other combination writes the processed value and
    lets the host reject a mismatch.
    """
    if target_type == VariableType.COLOR and is_hex_color(raw_value):
        return hex_to_rgb(raw_value)
    return processed_value

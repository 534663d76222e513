"""
Pydantic models for the token importer.

This module provides:
- Token / TokenSet: The import request
- RGB: Fractional color
- Mode / Variable / VariableCollection: The host's object model
- ImportResult: Summary of an import
"""

from chuk_mcp_figma_tokens.models.color import RGB
from chuk_mcp_figma_tokens.models.result import ImportResult
from chuk_mcp_figma_tokens.models.token import (
    InvalidTokenError,
    Token,
    TokenSet,
    TokenSetError,
    TokenValue,
)
from chuk_mcp_figma_tokens.models.variable import (
    Mode,
    Variable,
    VariableCollection,
    VariableValue,
)

__all__ = [
    "ImportResult",
    "InvalidTokenError",
    "Mode",
    "RGB",
    "Token",
    "TokenSet",
    "TokenSetError",
    "TokenValue",
    "Variable",
    "VariableCollection",
    "VariableValue",
]

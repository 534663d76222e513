"""
Token sets - reusable, file-based import requests.
"""

from chuk_mcp_figma_tokens.tokens.loader import TokenSetLoader, TokenSetMetadata

__all__ = [
    "TokenSetLoader",
    "TokenSetMetadata",
]

"""
CHUK Figma Tokens - import design tokens as design tool variables.
"""

from chuk_mcp_figma_tokens.importer import TokenImporter, import_tokens

__all__ = [
    "TokenImporter",
    "import_tokens",
]

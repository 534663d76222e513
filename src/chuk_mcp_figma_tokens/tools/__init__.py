"""
MCP tool implementations.

Tools are organized by domain:
- imports - Token import into the variable host
- token_sets - Token set discovery
- collections - Collection inspection and document saving
"""

from chuk_mcp_figma_tokens.tools.collections import register_collection_tools
from chuk_mcp_figma_tokens.tools.imports import register_import_tools
from chuk_mcp_figma_tokens.tools.token_sets import register_token_set_tools

__all__ = [
    "register_collection_tools",
    "register_import_tools",
    "register_token_set_tools",
]

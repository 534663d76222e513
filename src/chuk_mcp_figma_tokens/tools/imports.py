"""
Import tools - MCP tools that write tokens into the variable host.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_figma_tokens.constants import DEFAULT_COLLECTION_TITLE, ErrorMessages
from chuk_mcp_figma_tokens.importer import TokenImporter
from chuk_mcp_figma_tokens.models.result import ImportResult
from chuk_mcp_figma_tokens.tokens import TokenSetLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _result_json(result: ImportResult) -> str:
    if not result.success:
        return json.dumps({"status": "error", "message": result.error})
    return json.dumps({"status": "success", "result": result.to_summary()})


def register_import_tools(
    mcp: ChukMCPServer,
    importer: TokenImporter,
    loader: TokenSetLoader,
) -> dict[str, Any]:
    """
    Register token import tools with the MCP server.

    Args:
        mcp: The MCP server instance
        importer: The token importer
        loader: The token set loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def figma_import_tokens(
        items: list[dict[str, Any]],
        title: str = DEFAULT_COLLECTION_TITLE,
        description: str = "",
    ) -> str:
        """
        Import design tokens as variables.

        Creates the collection if it doesn't exist, then creates or
        updates one variable per item in its default mode. Values
        starting with '#' become colors, numbers become floats,
        booleans stay booleans, and anything else is a string.
        Items that can't be imported are skipped and reported.

        Args:
            items: List of {"name": ..., "value": ...} tokens
            title: Collection title (default: 'Imported Tokens')
            description: Optional collection description

        Returns:
            JSON string with import counts and per-item errors

        Example:
            figma_import_tokens(
                title="Brand Colors",
                items=[{"name": "Primary Blue", "value": "#007AFF"}]
            )
        """
        try:
            result = await importer.import_tokens(
                {"title": title, "description": description, "items": items}
            )
            return _result_json(result)
        except Exception as e:
            logger.exception("Failed to import tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["figma_import_tokens"] = figma_import_tokens

    @mcp.tool  # type: ignore[arg-type]
    async def figma_import_token_set(name: str) -> str:
        """
        Import a saved token set.

        Looks the token set up in the project first, then the
        built-in library.

        Args:
            name: Token set name (e.g., 'ux-ops-colors')

        Returns:
            JSON string with import counts and per-item errors

        Example:
            figma_import_token_set(name="ux-ops-colors")
        """
        try:
            token_set = loader.get_token_set(name)
            if token_set is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.TOKEN_SET_NOT_FOUND.format(name=name),
                    }
                )

            result = await importer.import_tokens(token_set)
            return _result_json(result)
        except Exception as e:
            logger.exception("Failed to import token set")
            return json.dumps({"status": "error", "message": str(e)})

    tools["figma_import_token_set"] = figma_import_token_set

    return tools

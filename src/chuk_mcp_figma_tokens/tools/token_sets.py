"""
Token set tools - MCP tools for token set discovery.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_figma_tokens.constants import ErrorMessages
from chuk_mcp_figma_tokens.tokens import TokenSetLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_token_set_tools(
    mcp: ChukMCPServer,
    loader: TokenSetLoader,
) -> dict[str, Any]:
    """
    Register token set tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The token set loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def figma_list_token_sets() -> str:
        """
        List available token sets.

        Returns token sets from the library and project.

        Returns:
            JSON string with list of token set summaries

        Example:
            figma_list_token_sets()
        """
        try:
            token_sets = loader.list_token_sets()

            return json.dumps(
                {
                    "status": "success",
                    "token_sets": [
                        {
                            "name": m.name,
                            "title": m.title,
                            "description": m.description,
                            "items": m.item_count,
                        }
                        for m in token_sets
                    ],
                    "count": len(token_sets),
                }
            )
        except Exception as e:
            logger.exception("Failed to list token sets")
            return json.dumps({"status": "error", "message": str(e)})

    tools["figma_list_token_sets"] = figma_list_token_sets

    @mcp.tool  # type: ignore[arg-type]
    async def figma_describe_token_set(name: str) -> str:
        """
        Get the contents of a token set.

        Args:
            name: Token set name

        Returns:
            JSON string with title, description and items

        Example:
            figma_describe_token_set(name="ux-ops-colors")
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

            return json.dumps({"status": "success", "token_set": token_set.to_dict()})
        except Exception as e:
            logger.exception("Failed to describe token set")
            return json.dumps({"status": "error", "message": str(e)})

    tools["figma_describe_token_set"] = figma_describe_token_set

    return tools

"""
Collection tools - MCP tools for inspecting the variable host.

Tools for listing collections, describing their variables, converting
hex colors, and saving a local document.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_figma_tokens.constants import ErrorMessages, SuccessMessages
from chuk_mcp_figma_tokens.core import hex_to_rgb, rgb_to_hex
from chuk_mcp_figma_tokens.hosts import DocumentHost, VariableHost
from chuk_mcp_figma_tokens.models.color import RGB

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _display_value(value: Any) -> Any:
    if isinstance(value, RGB):
        return rgb_to_hex(value)
    return value


def register_collection_tools(
    mcp: ChukMCPServer,
    host: VariableHost,
) -> dict[str, Any]:
    """
    Register collection tools with the MCP server.

    Args:
        mcp: The MCP server instance
        host: The variable host

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def figma_list_collections() -> str:
        """
        List variable collections.

        Returns:
            JSON string with collection names, ids and variable counts

        Example:
            figma_list_collections()
        """
        try:
            collections = await host.get_local_collections()

            return json.dumps(
                {
                    "status": "success",
                    "host": host.name,
                    "collections": [
                        {
                            "id": c.id,
                            "name": c.name,
                            "description": c.description,
                            "modes": [m.name for m in c.modes],
                            "variables": len(await host.get_collection_variables(c)),
                        }
                        for c in collections
                    ],
                    "count": len(collections),
                }
            )
        except Exception as e:
            logger.exception("Failed to list collections")
            return json.dumps({"status": "error", "message": str(e)})

    tools["figma_list_collections"] = figma_list_collections

    @mcp.tool  # type: ignore[arg-type]
    async def figma_describe_collection(name: str) -> str:
        """
        Get a collection's variables and their default-mode values.

        Colors are shown as '#RRGGBB'.

        Args:
            name: Collection name

        Returns:
            JSON string with collection details

        Example:
            figma_describe_collection(name="UX-Ops Colors")
        """
        try:
            collection = await host.find_collection(name)
            if collection is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.COLLECTION_NOT_FOUND.format(name=name),
                    }
                )

            mode_id = collection.default_mode.mode_id
            variables = await host.get_collection_variables(collection)

            return json.dumps(
                {
                    "status": "success",
                    "collection": {
                        "id": collection.id,
                        "name": collection.name,
                        "description": collection.description,
                        "default_mode": collection.default_mode.name,
                        "variables": [
                            {
                                "name": v.name,
                                "type": v.resolved_type.value,
                                "value": _display_value(v.value_for_mode(mode_id)),
                            }
                            for v in variables
                        ],
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe collection")
            return json.dumps({"status": "error", "message": str(e)})

    tools["figma_describe_collection"] = figma_describe_collection

    @mcp.tool  # type: ignore[arg-type]
    async def figma_hex_to_rgb(hex_color: str) -> str:
        """
        Convert a hex color to fractional RGB.

        Accepts 3 or 6 hex digits with an optional '#'.

        Args:
            hex_color: Hex color (e.g., '#FF9500', 'abc')

        Returns:
            JSON string with r, g, b in [0, 1]

        Example:
            figma_hex_to_rgb(hex_color="#FF9500")
        """
        try:
            rgb = hex_to_rgb(hex_color)
            return json.dumps({"status": "success", "rgb": rgb.to_dict()})
        except Exception as e:
            logger.exception("Failed to convert hex color")
            return json.dumps({"status": "error", "message": str(e)})

    tools["figma_hex_to_rgb"] = figma_hex_to_rgb

    @mcp.tool  # type: ignore[arg-type]
    async def figma_save_document() -> str:
        """
        Save the local variables document.

        Only available when variables are kept in a local document
        rather than a Figma file.

        Returns:
            JSON string with the saved path

        Example:
            figma_save_document()
        """
        try:
            if not isinstance(host, DocumentHost):
                return json.dumps(
                    {
                        "status": "error",
                        "message": f"The '{host.name}' host saves changes as they are made.",
                    }
                )

            path = host.save()
            return json.dumps(
                {
                    "status": "success",
                    "path": str(path),
                    "message": SuccessMessages.DOCUMENT_SAVED.format(path=path),
                }
            )
        except Exception as e:
            logger.exception("Failed to save document")
            return json.dumps({"status": "error", "message": str(e)})

    tools["figma_save_document"] = figma_save_document

    return tools

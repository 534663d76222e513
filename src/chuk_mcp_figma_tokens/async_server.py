#!/usr/bin/env python3
"""
Async Figma Tokens MCP Server using chuk-mcp-server

This server provides MCP tools for importing design tokens into a
design tool's variable system. Each token set becomes a variable
collection; each token becomes a variable in its default mode.

The server provides tools for:
- Importing token lists and saved token sets
- Discovering token sets in the library and project
- Inspecting collections and their variables
- Converting hex colors to fractional RGB

Variables are written to a Figma file when FIGMA_ACCESS_TOKEN and
FIGMA_FILE_KEY are set, and to a local YAML document otherwise.
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_figma_tokens.hosts import DocumentHost, FigmaRestHost, VariableHost
from chuk_mcp_figma_tokens.importer import TokenImporter
from chuk_mcp_figma_tokens.tokens import TokenSetLoader
from chuk_mcp_figma_tokens.tools import (
    register_collection_tools,
    register_import_tools,
    register_token_set_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-figma-tokens")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
TOKENS_DIR = BASE_PATH / "tokens"
DOCUMENT_PATH = Path(os.environ.get("FIGMA_TOKENS_DOCUMENT", BASE_PATH / "figma" / "document.yaml"))
LIBRARY_PATH = Path(__file__).parent / "tokens" / "library"


def create_host() -> VariableHost:
    """Pick the Figma REST host when credentials are set, else a local document."""
    access_token = os.environ.get("FIGMA_ACCESS_TOKEN")
    file_key = os.environ.get("FIGMA_FILE_KEY")

    if access_token and file_key:
        logger.info(f"Writing variables to Figma file {file_key}")
        return FigmaRestHost(file_key=file_key, access_token=access_token)

    logger.info(f"Writing variables to local document {DOCUMENT_PATH}")
    return DocumentHost(DOCUMENT_PATH).load()


# Create host, importer and loader
host = create_host()
importer = TokenImporter(host)
token_set_loader = TokenSetLoader(
    library_path=LIBRARY_PATH,
    project_path=TOKENS_DIR,
)

# Register all tools
import_tools = register_import_tools(mcp, importer, token_set_loader)
token_set_tools = register_token_set_tools(mcp, token_set_loader)
collection_tools = register_collection_tools(mcp, host)

# Export tool functions for direct access
figma_import_tokens = import_tools["figma_import_tokens"]
figma_import_token_set = import_tools["figma_import_token_set"]

figma_list_token_sets = token_set_tools["figma_list_token_sets"]
figma_describe_token_set = token_set_tools["figma_describe_token_set"]

figma_list_collections = collection_tools["figma_list_collections"]
figma_describe_collection = collection_tools["figma_describe_collection"]
figma_hex_to_rgb = collection_tools["figma_hex_to_rgb"]
figma_save_document = collection_tools["figma_save_document"]

logger.info("CHUK Figma Tokens MCP Server initialized")
logger.info(f"  Host: {host.name}")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Tokens dir: {TOKENS_DIR}")

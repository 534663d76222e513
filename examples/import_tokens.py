#!/usr/bin/env python3
"""
Example: Importing design tokens into a local variables document.

Imports the built-in UX-Ops color set, then imports it again to show
that a second run updates the same variables instead of adding new ones.

Usage:
    python examples/import_tokens.py
"""

import asyncio
import tempfile
from pathlib import Path

from chuk_mcp_figma_tokens.core import rgb_to_hex
from chuk_mcp_figma_tokens.hosts import DocumentHost
from chuk_mcp_figma_tokens.importer import TokenImporter
from chuk_mcp_figma_tokens.tokens import TokenSetLoader


async def main() -> None:
    """Demonstrate a token import."""
    print("CHUK Figma Tokens Import Demo")
    print("=" * 40)
    print()

    loader = TokenSetLoader()
    token_set = loader.get_token_set("ux-ops-colors")
    if token_set is None:
        print("Failed to load token set")
        return

    with tempfile.TemporaryDirectory() as tmp:
        host = DocumentHost(Path(tmp) / "document.yaml")
        importer = TokenImporter(host)

        result = await importer.import_tokens(token_set)
        print(f"First run: {result.created} created, {result.updated} updated")

        result = await importer.import_tokens(token_set)
        print(f"Second run: {result.created} created, {result.updated} updated")
        print()

        # A messy batch: bad names and bad values are skipped, not fatal
        result = await importer.import_tokens(
            {
                "title": "Scratch",
                "items": [
                    {"name": "Gap", "value": 12},
                    {"name": "Enabled", "value": True},
                    {"name": "!!!", "value": "#FFF"},
                    {"name": "Broken", "value": "#12345"},
                    {"name": "No value"},
                ],
            }
        )
        print(f"Scratch: imported {result.imported}, skipped {result.skipped}")
        for error in result.errors:
            print(f"  {error}")
        print()

        collection = await host.find_collection("UX-Ops Colors")
        if collection:
            mode_id = collection.default_mode.mode_id
            print(f"{collection.name} ({collection.description})")
            for variable in await host.get_collection_variables(collection):
                print(f"  {variable.name}: {rgb_to_hex(variable.value_for_mode(mode_id))}")

        path = host.save()
        print()
        print(f"Saved document to {path}")


if __name__ == "__main__":
    asyncio.run(main())

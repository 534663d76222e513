"""
Token importer - materializes a token set as host variables.

One pass over the items: each one is parsed, its name cleaned up, its
type inferred from the value, and its variable found or created in the
target collection before the default mode's value is set. A bad item
is recorded and skipped; the rest of the batch carries on.
"""

from __future__ import annotations

import logging
from typing import Any

from chuk_mcp_figma_tokens.constants import ErrorMessages, SuccessMessages
from chuk_mcp_figma_tokens.core import process_value, resolve_value, sanitize_name
from chuk_mcp_figma_tokens.hosts.base import VariableHost
from chuk_mcp_figma_tokens.models.result import ImportResult
from chuk_mcp_figma_tokens.models.token import InvalidTokenError, Token, TokenSet
from chuk_mcp_figma_tokens.models.variable import Mode, VariableCollection

logger = logging.getLogger(__name__)


class TokenImporter:
    """
    Imports token sets into a variable host.

    The importer is stateless between calls; running the same token set
    twice updates the variables created by the first run.
    """

    def __init__(self, host: VariableHost | None):
        """
        Initialize the importer.

        Args:
            host: The variable host to write to
        """
        self.host = host

    async def import_tokens(self, data: TokenSet | dict[str, Any]) -> ImportResult:
        """
        Import a token set.

        Never raises: a fatal problem (no host, malformed data, a failing
        collection lookup) is returned as a failed result.

        Args:
            data: A TokenSet or a mapping with title, description and items

        Returns:
            ImportResult with counts and per-item messages
        """
        try:
            if self.host is None:
                raise RuntimeError(ErrorMessages.HOST_UNAVAILABLE)

            token_set = TokenSet.from_data(data)
            return await self._import(self.host, token_set)
        except Exception as e:
            logger.error(f"Failed to import tokens: {e}")
            if self.host is not None:
                try:
                    await self.host.notify(ErrorMessages.IMPORT_FAILED.format(error=e), error=True)
                except Exception:
                    logger.exception("Failed to send failure notification")
            return ImportResult.failure(str(e))

    async def _import(self, host: VariableHost, token_set: TokenSet) -> ImportResult:
        title = token_set.title
        collection = await self._get_or_create_collection(host, title)

        if token_set.description:
            await host.set_collection_description(collection, token_set.description)

        default_mode = collection.default_mode
        result = ImportResult(success=True, collection=collection)

        for item in token_set.items:
            try:
                await self._import_item(host, collection, default_mode, item, result)
            except InvalidTokenError as e:
                result.errors.append(str(e))
                result.skipped += 1
            except Exception as e:
                name = item.get("name") if isinstance(item, dict) else None
                result.errors.append(
                    ErrorMessages.ITEM_FAILED.format(name=name or "unknown", error=e)
                )
                result.skipped += 1

        self._log_summary(title, result)
        await host.notify(SuccessMessages.IMPORTED.format(count=result.imported, title=title))
        return result

    async def _get_or_create_collection(
        self, host: VariableHost, title: str
    ) -> VariableCollection:
        collection = await host.find_collection(title)
        if collection is not None:
            logger.info(f"Using existing collection: {title}")
            return collection

        collection = await host.create_collection(title)
        logger.info(f"Created new collection: {title}")
        return collection

    async def _import_item(
        self,
        host: VariableHost,
        collection: VariableCollection,
        mode: Mode,
        item: Any,
        result: ImportResult,
    ) -> None:
        token = Token.from_item(item)

        variable_name = sanitize_name(token.name)
        if not variable_name:
            raise InvalidTokenError(ErrorMessages.INVALID_NAME.format(name=token.name))

        variable_type, processed_value = process_value(token.value)

        variable = await host.find_variable(collection, variable_name)
        if variable is not None:
            logger.info(f"Updating existing variable: {variable_name}")
            created = False
        else:
            variable = await host.create_variable(variable_name, collection, variable_type)
            logger.info(f"Created new variable: {variable_name} ({variable_type.value})")
            created = True

        value = resolve_value(token.value, processed_value, variable.resolved_type)
        await host.set_value_for_mode(variable, mode.mode_id, value)

        result.imported += 1
        if created:
            result.created += 1
        else:
            result.updated += 1

    def _log_summary(self, title: str, result: ImportResult) -> None:
        logger.info("=== Import Results ===")
        logger.info(f"Collection: {title}")
        logger.info(f"Successfully imported: {result.imported} variables")
        logger.info(f"Skipped: {result.skipped} items")

        if result.errors:
            logger.warning("Errors/Warnings:")
            for error in result.errors:
                logger.warning(error)


async def import_tokens(
    host: VariableHost | None, data: TokenSet | dict[str, Any]
) -> ImportResult:
    """
    Import a token set into a host.

    Example:
        result = await import_tokens(DocumentHost(), {
            "title": "Brand Colors",
            "items": [{"name": "Primary Blue", "value": "#007AFF"}],
        })
    """
    return await TokenImporter(host).import_tokens(data)

"""
Token models - the import request.

A TokenSet is a titled, flat list of name/value items. Items are kept
as raw mappings until the importer parses them one at a time, so a
single bad item never invalidates the whole set.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from chuk_mcp_figma_tokens.constants import DEFAULT_COLLECTION_TITLE, ErrorMessages

TokenValue = StrictBool | StrictInt | StrictFloat | StrictStr


class InvalidTokenError(ValueError):
    """Raised when a token item is missing its name or value."""


class TokenSetError(ValueError):
    """Raised when token data is not a set with an items list."""


class Token(BaseModel):
    """A single named design value."""

    name: str = Field(..., description="Token name as written by the author")
    value: TokenValue = Field(..., description="Hex color, number, boolean or string")

    model_config = {"frozen": True}

    @classmethod
    def from_item(cls, item: Any) -> Token:
        """
        Parse a raw token item.

        A missing, empty or non-string name, or a missing/None value, is rejected.
        Values of any other kind are kept as their string form.

        Raises:
            InvalidTokenError: If the item can't be used as a token
        """
        if not isinstance(item, Mapping):
            raise InvalidTokenError(ErrorMessages.MISSING_NAME_OR_VALUE.format(item=_describe(item)))

        name = item.get("name")
        value = item.get("value")
        if not name or value is None:
            raise InvalidTokenError(ErrorMessages.MISSING_NAME_OR_VALUE.format(item=_describe(item)))

        if not isinstance(name, str):
            raise InvalidTokenError(ErrorMessages.NAME_NOT_STRING.format(item=_describe(item)))
        if not isinstance(value, bool | int | float | str):
            value = str(value)

        return cls(name=name, value=value)


class TokenSet(BaseModel):
    """A titled collection of token items to import."""

    title: str = Field(default=DEFAULT_COLLECTION_TITLE, description="Collection title")
    description: str = Field(default="", description="Collection description")
    items: list[Any] = Field(default_factory=list, description="Raw token items")

    @classmethod
    def from_data(cls, data: Any) -> TokenSet:
        """
        Build a token set from a mapping (or pass an existing set through).

        Raises:
            TokenSetError: If data isn't a mapping with an 'items' list
        """
        if isinstance(data, TokenSet):
            return data
        if not isinstance(data, Mapping) or not isinstance(data.get("items"), list):
            raise TokenSetError(ErrorMessages.INVALID_TOKEN_DATA)

        return cls(
            title=data.get("title") or DEFAULT_COLLECTION_TITLE,
            description=data.get("description") or "",
            items=list(data["items"]),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the canonical token-set file shape."""
        return {
            "title": self.title,
            "description": self.description,
            "items": list(self.items),
        }


def _describe(item: Any) -> str:
    """Render an item for an error message."""
    try:
        return json.dumps(item)
    except (TypeError, ValueError):
        return repr(item)

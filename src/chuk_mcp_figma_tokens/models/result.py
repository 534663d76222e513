"""
Import result - the summary returned by every import.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_figma_tokens.models.variable import VariableCollection


class ImportResult(BaseModel):
    """
    Outcome of importing a token set.

    A successful import may still have skipped items; their messages
    are collected in errors. A failed import carries only error.
    """

    success: bool = Field(..., description="False only when the batch aborted")
    collection: VariableCollection | None = Field(None, description="Target collection")
    imported: int = Field(default=0, ge=0, description="Variables written")
    created: int = Field(default=0, ge=0, description="Variables newly created")
    updated: int = Field(default=0, ge=0, description="Existing variables overwritten")
    skipped: int = Field(default=0, ge=0, description="Items not written")
    errors: list[str] = Field(default_factory=list, description="Per-item messages")
    error: str | None = Field(None, description="Fatal error message")

    @classmethod
    def failure(cls, message: str) -> ImportResult:
        """Build the result of an aborted import."""
        return cls(success=False, error=message)

    def to_summary(self) -> dict[str, Any]:
        """Convert to a JSON-friendly summary."""
        if not self.success:
            return {"success": False, "error": self.error}

        return {
            "success": True,
            "collection": self.collection.name if self.collection else None,
            "imported": self.imported,
            "created": self.created,
            "updated": self.updated,
            "skipped": self.skipped,
            "errors": list(self.errors),
        }

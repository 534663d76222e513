"""
Color model - fractional RGB as design tools store it.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RGB(BaseModel):
    """An RGB color with each channel in [0, 1]."""

    r: float = Field(..., ge=0.0, le=1.0, description="Red channel")
    g: float = Field(..., ge=0.0, le=1.0, description="Green channel")
    b: float = Field(..., ge=0.0, le=1.0, description="Blue channel")

    model_config = {"frozen": True}

    def to_dict(self) -> dict[str, float]:
        """Convert to the plain {r, g, b} mapping used on the wire."""
        return {"r": self.r, "g": self.g, "b": self.b}

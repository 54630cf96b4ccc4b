"""Geometric primitives used throughout the drawing engine."""

from __future__ import annotations
import math
from pydantic import BaseModel


class Point2D(BaseModel):
    """Point on the drawing plane (SVG convention: y grows downwards)."""
    x: float
    y: float


class Box(BaseModel):
    """Axis-aligned rectangle in drawing pixels."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point2D:
        return Point2D(x=self.x + self.width / 2, y=self.y + self.height / 2)

    def inset(self, amount: float) -> Box:
        """Shrink on all sides; never produces a negative size."""
        width = max(0.0, self.width - 2 * amount)
        height = max(0.0, self.height - 2 * amount)
        return Box(
            x=self.x + min(amount, self.width / 2),
            y=self.y + min(amount, self.height / 2),
            width=width,
            height=height,
        )


def round_half_up(value: float) -> int:
    """Round like a drafting rule does: .5 always goes up."""
    return int(math.floor(value + 0.5))

"""Rectangle model: a plain width/height value with an area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


def make_rectangle(width: float, height: float) -> Rectangle:
    """Return a rectangle with the given dimensions."""
    return Rectangle(width=width, height=height)

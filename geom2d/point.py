"""Mutable 2D point used by rectangle corner and size queries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Point:
    """Mutable x/y pair."""

    x: float = 0
    y: float = 0

    def set_to(self, x: float, y: float) -> Point:
        """Set both coordinates and return this point."""
        self.x = x
        self.y = y
        return self

    def clone(self, output: Point | None = None) -> Point:
        target = Point() if output is None else output
        return target.set_to(self.x, self.y)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


__all__ = ["Point"]

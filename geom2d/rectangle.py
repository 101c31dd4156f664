"""Mutable axis-aligned rectangle value type.

A rectangle is anchored at its top-left corner ``(x, y)`` and extends by
``width``/``height``. Every edge is derived from those four fields.

Two boundary conventions coexist on purpose:

* ``contains``/``contains_rect`` are inclusive on all four edges.
* ``intersects``/``intersection`` use pixel-grid rules, treating the rectangle
  as covering ``[x, right - 1] x [y, bottom - 1]``.

The permissive setters never raise. Non-numeric input or a negative size
turns the call into a no-op for the offending values. ``checked`` and
``set_to_checked`` are the raising counterparts.

Operations that produce a ``Point`` or ``Rectangle`` accept an optional
``output`` instance that receives the result. If it is omitted, a new
instance is allocated.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from geom2d.config import enabled_rejection_trace
from geom2d.errors import is_finite_real, is_real, require_finite, require_size
from geom2d.logging import get_geometry_logger
from geom2d.point import Point
from geom2d.transform import Transform

_LOG = get_geometry_logger("geom2d.rectangle")


@dataclass(frozen=True, slots=True)
class OverlapResult:
    """Edge-by-edge overlap descriptor between two rectangles."""

    top: bool = False
    bottom: bool = False
    left: bool = False
    right: bool = False
    contains: bool = False
    contained: bool = False


def _round_half_up(value: float) -> float:
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def _trace_rejection(event: str, *values: object) -> None:
    if _LOG.isEnabledFor(logging.DEBUG) and enabled_rejection_trace():
        _LOG.debug("%s values=%r", event, values, extra={"event": event, "values": values})


class Rectangle:
    """Axis-aligned rectangle defined by its top-left corner and size."""

    __slots__ = ("x", "y", "width", "height")

    # Mutable with structural equality.
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        x: float = 0,
        y: float = 0,
        width: float = 0,
        height: float = 0,
    ) -> None:
        self.x: float = 0
        self.y: float = 0
        self.width: float = 0
        self.height: float = 0
        self.set_to(x, y, width, height)

    @classmethod
    def checked(cls, x: float = 0, y: float = 0, width: float = 0, height: float = 0) -> Rectangle:
        """Construct a rectangle, raising ``InvalidGeometryError`` on bad input."""
        return cls().set_to_checked(x, y, width, height)

    def obj_type(self) -> str:
        return "Rectangle"

    def __repr__(self) -> str:
        return f"Rectangle(x={self.x}, y={self.y}, width={self.width}, height={self.height})"

    def __str__(self) -> str:
        empty = "true" if self.is_empty else "false"
        return (
            f"[{{Rectangle (x={self.x} y={self.y} width={self.width} "
            f"height={self.height} isEmpty={empty})}}]"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.equals(other)

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    def set_to(self, x: float, y: float, width: float, height: float) -> Rectangle:
        """Set all four fields.

        Nothing changes unless every value is a finite number. A negative
        width or height is dropped on its own and the other fields still apply.
        """
        if not (
            is_finite_real(x)
            and is_finite_real(y)
            and is_finite_real(width)
            and is_finite_real(height)
        ):
            _trace_rejection("rect_set_to_rejected", x, y, width, height)
            return self
        self.x = x
        self.y = y
        if width >= 0:
            self.width = width
        else:
            _trace_rejection("rect_width_rejected", width)
        if height >= 0:
            self.height = height
        else:
            _trace_rejection("rect_height_rejected", height)
        return self

    def set_to_checked(self, x: float, y: float, width: float, height: float) -> Rectangle:
        """Set all four fields or raise ``InvalidGeometryError`` without mutating."""
        require_finite("x", x)
        require_finite("y", y)
        require_size("width", width)
        require_size("height", height)
        return self.set_to(x, y, width, height)

    def set_empty(self) -> Rectangle:
        return self.set_to(0, 0, 0, 0)

    @property
    def left(self) -> float:
        return self.x

    @left.setter
    def left(self, value: float) -> None:
        # Right edge stays put; x always moves even when the width collapses.
        if not is_finite_real(value):
            _trace_rejection("rect_left_rejected", value)
            return
        diff = self.x - value
        if self.width + diff < 0:
            self.width = 0
        else:
            self.width += diff
        self.x = value

    @property
    def top(self) -> float:
        return self.y

    @top.setter
    def top(self, value: float) -> None:
        if not is_finite_real(value):
            _trace_rejection("rect_top_rejected", value)
            return
        diff = self.y - value
        if self.height + diff < 0:
            self.height = 0
        else:
            self.height += diff
        self.y = value

    @property
    def right(self) -> float:
        return self.x + self.width

    @right.setter
    def right(self, value: float) -> None:
        # x never moves here, unlike the left setter.
        if not is_finite_real(value):
            _trace_rejection("rect_right_rejected", value)
            return
        if value < self.x:
            self.width = 0
        else:
            self.width = value - self.x

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @bottom.setter
    def bottom(self, value: float) -> None:
        if not is_finite_real(value):
            _trace_rejection("rect_bottom_rejected", value)
            return
        if value < self.y:
            self.height = 0
        else:
            self.height = value - self.y

    @property
    def volume(self) -> float:
        return self.width * self.height

    @property
    def perimeter(self) -> float:
        return (self.width * 2) + (self.height * 2)

    @property
    def is_empty(self) -> bool:
        return self.width < 1 or self.height < 1

    def center(self, output: Point | None = None) -> Point:
        """Return the center relative to the top-left corner, rounded half up."""
        target = Point() if output is None else output
        return target.set_to(_round_half_up(self.width / 2), _round_half_up(self.height / 2))

    def size(self, output: Point | None = None) -> Point:
        target = Point() if output is None else output
        return target.set_to(self.width, self.height)

    def top_left(self, value: Point | None = None, output: Point | None = None) -> Point:
        """Optionally move the top-left corner, then return it."""
        if value is not None:
            if is_finite_real(value.x) and is_finite_real(value.y):
                self.x = value.x
                self.y = value.y
            else:
                _trace_rejection("rect_top_left_rejected", value.x, value.y)
        target = Point() if output is None else output
        return target.set_to(self.x, self.y)

    def bottom_right(self, value: Point | None = None, output: Point | None = None) -> Point:
        """Optionally move the bottom-right corner through the edge setters, then return it."""
        if value is not None:
            self.right = value.x
            self.bottom = value.y
        target = Point() if output is None else output
        return target.set_to(self.right, self.bottom)

    def contains(self, px: float, py: float) -> bool:
        """Return whether a point lies inside, edges included."""
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def contains_point(self, point: Point) -> bool:
        return self.contains(point.x, point.y)

    def contains_rect(self, other: Rectangle) -> bool:
        """Return whether ``other`` lies entirely within this rectangle, edges included."""
        if other.volume > self.volume:
            return False
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def intersects(self, other: Rectangle) -> bool:
        """Return whether two rectangles overlap on the pixel grid.

        Each rectangle covers ``[x, right - 1]`` horizontally and
        ``[y, bottom - 1]`` vertically, so rectangles that only share an edge
        do not intersect.
        """
        if other.x > self.right - 1:
            return False
        if other.right - 1 < self.x:
            return False
        if other.bottom - 1 < self.y:
            return False
        if other.y > self.bottom - 1:
            return False
        return True

    def intersection(self, other: Rectangle, output: Rectangle | None = None) -> Rectangle:
        """Return the overlapping area.

        ``output`` is left untouched when the rectangles do not intersect, so
        a freshly allocated result is all zeros. Fields are assigned directly,
        so a negative overlap size left by a shrinking ``inflate`` carries
        through.
        """
        target = Rectangle() if output is None else output
        if self.intersects(other):
            x = max(other.x, self.x)
            y = max(other.y, self.y)
            target.x = x
            target.y = y
            target.width = min(other.right, self.right) - x
            target.height = min(other.bottom, self.bottom) - y
        return target

    def union(self, other: Rectangle, output: Rectangle | None = None) -> Rectangle:
        """Return the smallest rectangle enclosing both rectangles."""
        target = Rectangle() if output is None else output
        x = min(other.x, self.x)
        y = min(other.y, self.y)
        return target.set_to(
            x,
            y,
            max(other.right, self.right) - x,
            max(other.bottom, self.bottom) - y,
        )

    def overlap(self, other: Rectangle) -> OverlapResult:
        """Describe how this rectangle overlaps ``other``.

        The edge flags are True when this rectangle sticks out past the
        matching edge of ``other``. All flags are False when the intersection
        is empty.
        """
        if self.intersection(other).is_empty:
            return OverlapResult()
        return OverlapResult(
            top=self.top < other.top,
            bottom=self.bottom > other.bottom,
            left=self.left < other.left,
            right=self.right > other.right,
            contains=self.contains_rect(other),
            contained=other.contains_rect(self),
        )

    def inflate(self, dx: float, dy: float) -> Rectangle:
        """Grow by ``dx`` on the left and right sides and by ``dy`` on the top and bottom."""
        if not (is_real(dx) and is_real(dy)):
            _trace_rejection("rect_inflate_rejected", dx, dy)
            return self
        self.x -= dx
        self.width += 2 * dx
        self.y -= dy
        self.height += 2 * dy
        return self

    def inflate_point(self, point: Point) -> Rectangle:
        return self.inflate(point.x, point.y)

    def offset(self, dx: float, dy: float) -> Rectangle:
        """Translate the top-left corner."""
        if not (is_real(dx) and is_real(dy)):
            _trace_rejection("rect_offset_rejected", dx, dy)
            return self
        self.x += dx
        self.y += dy
        return self

    def offset_point(self, point: Point) -> Rectangle:
        return self.offset(point.x, point.y)

    def scale(self, sx: float, sy: float, translation: Point) -> Rectangle:
        """Scale the size and map the top-left corner through a scale+translate transform."""
        transform = Transform().scale(sx, sy).translate(translation.x, translation.y)
        self.top_left(transform.transform_point(self.top_left()))
        self.width *= sx
        self.height *= sy
        return self

    def clone(self, output: Rectangle | None = None) -> Rectangle:
        target = Rectangle() if output is None else output
        return target.copy_from(self)

    def copy_from(self, source: Rectangle) -> Rectangle:
        """Copy all four fields verbatim, including sizes a negative inflate produced."""
        self.x = source.x
        self.y = source.y
        self.width = source.width
        self.height = source.height
        return self

    def copy_to(self, target: Rectangle) -> Rectangle:
        return target.copy_from(self)

    def equals(self, other: Rectangle) -> bool:
        """Return whether all four fields match exactly."""
        return (
            self.x == other.x
            and self.y == other.y
            and self.width == other.width
            and self.height == other.height
        )


__all__ = ["OverlapResult", "Rectangle"]

"""Rectangle layout helpers for parent/child bounds."""

from __future__ import annotations

from collections.abc import Sequence

from geom2d.rectangle import Rectangle


def bounding_rect(
    rects: Sequence[Rectangle],
    *,
    pad_x: float = 0.0,
    pad_y: float = 0.0,
    output: Rectangle | None = None,
) -> Rectangle:
    """Compute bounds that fit all rectangles plus optional padding."""
    target = Rectangle() if output is None else output
    if not rects:
        return target.set_empty()
    bounds = rects[0].clone()
    for rect in rects[1:]:
        bounds.union(rect, output=bounds)
    px = max(0.0, float(pad_x))
    py = max(0.0, float(pad_y))
    return target.set_to(
        bounds.x - px,
        bounds.y - py,
        bounds.width + (2.0 * px),
        bounds.height + (2.0 * py),
    )


def clamp_rect(
    child: Rectangle,
    parent: Rectangle,
    *,
    pad_x: float = 0.0,
    pad_y: float = 0.0,
    output: Rectangle | None = None,
) -> Rectangle:
    """Clamp child rectangle to fit inside the parent content box."""
    target = Rectangle() if output is None else output
    content_x = float(parent.x) + max(0.0, float(pad_x))
    content_y = float(parent.y) + max(0.0, float(pad_y))
    content_w = max(0.0, float(parent.width) - (2.0 * max(0.0, float(pad_x))))
    content_h = max(0.0, float(parent.height) - (2.0 * max(0.0, float(pad_y))))
    child_w = min(max(0.0, float(child.width)), content_w)
    child_h = min(max(0.0, float(child.height)), content_h)
    max_x = content_x + content_w - child_w
    max_y = content_y + content_h - child_h
    child_x = min(max(float(child.x), content_x), max_x)
    child_y = min(max(float(child.y), content_y), max_y)
    return target.set_to(child_x, child_y, child_w, child_h)


__all__ = ["bounding_rect", "clamp_rect"]

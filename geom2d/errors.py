"""Shared geometry input policy helpers."""

from __future__ import annotations

import math
from numbers import Real


class InvalidGeometryError(ValueError):
    """Raised by checked geometry setters when input cannot be applied."""


def is_real(value: object) -> bool:
    """Return whether a value is a non-NaN real number."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not math.isnan(value)


def is_finite_real(value: object) -> bool:
    """Return whether a value is a finite real number."""
    return is_real(value) and math.isfinite(value)


def require_finite(name: str, value: object) -> float:
    if not is_finite_real(value):
        raise InvalidGeometryError(f"{name} must be a finite number, got {value!r}")
    return value


def require_size(name: str, value: object) -> float:
    require_finite(name, value)
    if value < 0:
        raise InvalidGeometryError(f"{name} must be >= 0, got {value!r}")
    return value


__all__ = [
    "InvalidGeometryError",
    "is_finite_real",
    "is_real",
    "require_finite",
    "require_size",
]

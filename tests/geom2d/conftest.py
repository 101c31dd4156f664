from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from geom2d.logging import shutdown_geometry_logging
from geom2d.rectangle import Rectangle

_GEOM2D_ENV_VARS = (
    "GEOM2D_LOG_LEVEL",
    "GEOM2D_LOG_FORMAT",
    "GEOM2D_LOG_FILE",
    "GEOM2D_TRACE_REJECTIONS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_geom2d_env(monkeypatch) -> None:
    for name in _GEOM2D_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        yield root
    finally:
        shutdown_geometry_logging()
        for handler in root.handlers:
            if handler not in original_handlers:
                handler.close()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


@pytest.fixture
def rect_samples() -> list[Rectangle]:
    """Deterministic spread of rectangles, including negative origins and fractional sizes."""
    return [
        Rectangle(0, 0, 10, 10),
        Rectangle(10, 0, 5, 5),
        Rectangle(-20, -5, 7, 40),
        Rectangle(3.5, 2.25, 0.5, 12),
        Rectangle(100, 100, 0, 0),
        Rectangle(-1, -1, 2, 2),
        Rectangle(50, -30, 25, 5),
    ]

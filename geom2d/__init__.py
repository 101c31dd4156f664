"""Engine geometry primitives."""

from geom2d.config import GeometryConfig, load_geometry_config
from geom2d.errors import InvalidGeometryError
from geom2d.layout import bounding_rect, clamp_rect
from geom2d.logging import (
    GeometryLoggingConfig,
    configure_geometry_logging,
    get_geometry_logger,
    setup_geometry_logging,
)
from geom2d.point import Point
from geom2d.rectangle import OverlapResult, Rectangle
from geom2d.transform import Transform

__all__ = [
    "GeometryConfig",
    "GeometryLoggingConfig",
    "InvalidGeometryError",
    "OverlapResult",
    "Point",
    "Rectangle",
    "Transform",
    "bounding_rect",
    "clamp_rect",
    "configure_geometry_logging",
    "get_geometry_logger",
    "load_geometry_config",
    "setup_geometry_logging",
]

"""Geometry module configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True, slots=True)
class GeometryConfig:
    """Immutable geometry module configuration."""

    log_level: str
    log_format: str
    log_file: str | None
    trace_rejections: bool


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _normalize_log_format(raw: str) -> str:
    value = str(raw).strip().lower()
    if value not in {"text", "json"}:
        return "text"
    return value


def resolve_log_level_name(
    default: str = "INFO", *, env: Mapping[str, str] | None = None
) -> str:
    """Resolve log level with module-prefixed override."""
    value = _raw("GEOM2D_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = default
    return value.strip().upper()


def load_geometry_config(*, env: Mapping[str, str] | None = None) -> GeometryConfig:
    """Load immutable geometry configuration from env vars."""
    log_file = _text("GEOM2D_LOG_FILE", "", env=env)
    return GeometryConfig(
        log_level=resolve_log_level_name(env=env),
        log_format=_normalize_log_format(_text("GEOM2D_LOG_FORMAT", "text", env=env)),
        log_file=log_file if log_file else None,
        trace_rejections=_flag("GEOM2D_TRACE_REJECTIONS", False, env=env),
    )


def enabled_rejection_trace() -> bool:
    return load_geometry_config().trace_rejections


__all__ = [
    "GeometryConfig",
    "enabled_rejection_trace",
    "load_geometry_config",
    "resolve_log_level_name",
]

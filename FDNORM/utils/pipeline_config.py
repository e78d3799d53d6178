"""Centralized, env-backed configuration for the FD engine and steps.

Values come from the `fd` section of config.yaml and can be overridden per process
with environment variables. The yaml section is read once per process; env vars are
read at call time so overrides apply without re-import. Malformed values fall back
to the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict

import yaml

from FDNORM.utils.logging import get_logger

logger = get_logger(__name__)


def _to_int(raw: Any, default: int) -> int:
    if raw is None or str(raw).strip() == "":
        return default
    if isinstance(raw, bool):
        return int(raw)
    try:
        return int(str(raw).strip())
    except ValueError:
        return default


def _get_int(
    name: str,
    default: int,
    *,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    value = _to_int(os.getenv(name), default)
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


@lru_cache(maxsize=1)
def _load_fd_section() -> Dict[str, Any]:
    from FDNORM.config.loader import get_config

    try:
        section = get_config("fd")
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        logger.warning(f"Ignoring unreadable config.yaml, using FD engine defaults: {e}")
        return {}
    return section if isinstance(section, dict) else {}


@dataclass(frozen=True)
class FDEngineConfig:
    """FD engine tuning knobs."""

    # Projection enumerates every non-empty subset; log a warning above this size
    projection_warn_attributes: int = 20

    # Step layer: use the exhaustive power-set key search instead of the fixed-point one
    exhaustive_key_search: int = 0

    # Step layer: log the full normalized schema at INFO
    log_decomposition: int = 1

    @classmethod
    def from_env(cls) -> "FDEngineConfig":
        section = _load_fd_section()
        return cls(
            projection_warn_attributes=_get_int(
                "FDNORM_PROJECTION_WARN_ATTRIBUTES",
                _to_int(section.get("projection_warn_attributes"), 20),
                min_value=1,
                max_value=64,
            ),
            exhaustive_key_search=_get_int(
                "FDNORM_EXHAUSTIVE_KEY_SEARCH",
                _to_int(section.get("exhaustive_key_search"), 0),
                min_value=0,
                max_value=1,
            ),
            log_decomposition=_get_int(
                "FDNORM_LOG_DECOMPOSITION",
                _to_int(section.get("log_decomposition"), 1),
                min_value=0,
                max_value=1,
            ),
        )


def get_fd_engine_config() -> FDEngineConfig:
    return FDEngineConfig.from_env()


def reload_fd_engine_config() -> FDEngineConfig:
    """Drop the cached yaml section (e.g. after editing config.yaml) and re-read it."""
    _load_fd_section.cache_clear()
    return get_fd_engine_config()

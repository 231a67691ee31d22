"""
Runtime settings for the star-cut engine.

Settings are an immutable value handed to the driver by its caller
rather than module state.  ``load_settings`` builds one from the
environment so the HTTP layer can be tuned without code changes:

- ``STARCUT_DEBUG`` – any truthy value enables per-step debug tracing.
- ``STARCUT_MERGE_THRESHOLD`` – distance below which two intersection
  points are merged (default ``0.001``).
- ``STARCUT_HULL_EXPANSION`` – outward scale factor applied around the
  centroid when filtering crossings of self-intersecting stars
  (default ``5.0``).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .primitives import MERGE_THRESHOLD

logger = logging.getLogger(__name__)

DEFAULT_HULL_EXPANSION_FACTOR: float = 5.0

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class StarCutSettings:
    """Tunable parameters of :func:`compute_star_cuts`.

    Attributes:
        merge_threshold: Minimum distance between two retained
            intersection points.
        hull_expansion_factor: Scale applied to the vertices around their
            centroid before building the containment hull of a
            self-intersecting star.  Empirical, not a derived bound.
        debug: Emit debug-level tracing for every candidate pair.
    """

    merge_threshold: float = MERGE_THRESHOLD
    hull_expansion_factor: float = DEFAULT_HULL_EXPANSION_FACTOR
    debug: bool = False


def _read_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring malformed %s=%r; using %s", name, raw, default)
        return default
    if value <= 0.0:
        logger.warning("Ignoring non-positive %s=%r; using %s", name, raw, default)
        return default
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> StarCutSettings:
    """Build :class:`StarCutSettings` from environment variables.

    Args:
        env: Mapping to read from.  Defaults to ``os.environ``.
    """
    source = os.environ if env is None else env
    debug = (source.get("STARCUT_DEBUG") or "").strip().lower() in _TRUTHY
    return StarCutSettings(
        merge_threshold=_read_float(source, "STARCUT_MERGE_THRESHOLD", MERGE_THRESHOLD),
        hull_expansion_factor=_read_float(
            source, "STARCUT_HULL_EXPANSION", DEFAULT_HULL_EXPANSION_FACTOR
        ),
        debug=debug,
    )


__all__ = ["StarCutSettings", "DEFAULT_HULL_EXPANSION_FACTOR", "load_settings"]

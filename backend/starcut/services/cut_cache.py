"""
Simple in‑memory caching layer for regular star cuts.

Computing the cuts of a star is quadratic in its vertex count, and the
same regular star is requested over and over while a user scrubs a
parameter.  A ``StarCutCacheKey`` uniquely identifies a regular star by
vertex count, skip and radius together with the settings that affect
the result.

The cache is implemented as an ``OrderedDict`` to provide
least‑recently‑used (LRU) eviction.  When the number of cached
entries exceeds ``MAX_CACHE_ENTRIES`` the oldest entry is dropped.

Usage::

    from .cut_cache import StarCutCacheKey, get_cuts_from_cache, put_cuts_in_cache
    key = StarCutCacheKey(n=5, skip=2, radius=400.0)
    cuts = get_cuts_from_cache(key)
    if cuts is None:
        cuts = compute_star_cuts(build_star_vertices(400.0, 5, 2), 2)
        put_cuts_in_cache(key, cuts)

"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from threading import RLock
from typing import List, Optional

from .primitives import MERGE_THRESHOLD, Point2D
from .settings import DEFAULT_HULL_EXPANSION_FACTOR


@dataclass(frozen=True)
class StarCutCacheKey:
    """Unique identifier for a cached star-cut result.

    Attributes:
        n: Vertex count of the regular star.
        skip: Skip value as requested.
        radius: Diameter passed to ``build_star_vertices``.
        merge_threshold: Merge threshold used for the computation.
        hull_expansion_factor: Hull expansion used for the computation.
    """

    n: int
    skip: int
    radius: float
    merge_threshold: float = MERGE_THRESHOLD
    hull_expansion_factor: float = DEFAULT_HULL_EXPANSION_FACTOR


# Underlying storage.  Values are stored as tuples so that callers
# cannot mutate a cached result through the list they receive.
_cache: "OrderedDict[StarCutCacheKey, tuple]" = OrderedDict()
_lock = RLock()
# Maximum number of entries retained in the cache.
MAX_CACHE_ENTRIES: int = 32


def get_cuts_from_cache(key: StarCutCacheKey) -> Optional[List[Point2D]]:
    """Retrieve cached cuts if available.

    Returns:
        A fresh list of points if present in the cache, otherwise ``None``.
    """
    with _lock:
        cuts = _cache.get(key)
        if cuts is None:
            return None
        _cache.move_to_end(key)
        return list(cuts)


def put_cuts_in_cache(key: StarCutCacheKey, cuts: List[Point2D]) -> None:
    """Insert cuts into the cache, evicting the oldest entry when full."""
    with _lock:
        _cache[key] = tuple(cuts)
        _cache.move_to_end(key)
        while len(_cache) > MAX_CACHE_ENTRIES:
            _cache.popitem(last=False)


def clear_cut_cache() -> None:
    """Remove all entries from the cut cache."""
    with _lock:
        _cache.clear()


def cut_cache_size() -> int:
    """Return the number of cached entries."""
    with _lock:
        return len(_cache)


__all__ = [
    "StarCutCacheKey",
    "MAX_CACHE_ENTRIES",
    "get_cuts_from_cache",
    "put_cuts_in_cache",
    "clear_cut_cache",
    "cut_cache_size",
]

"""
Self-intersection classification for star polygons {n/k}.

A star descriptor ``(n, k)`` connects vertex ``i`` to ``(i + k) mod n``.
Before classifying, the skip is normalised: reduced modulo ``n``,
reflected into ``(0, n/2]`` and, if it reduces to zero, mapped to ``n``.

With ``d = gcd(n, k)``:

- ``d == 1`` and ``1 < k < n/2``: the star crosses itself.
- ``1 < d < n``: the figure splits into ``d`` copies of ``{n/d, k/d}``,
  which is classified instead.
- anything else (``k == 1``, ``k == n/2``, ``d == n``) does not cross
  itself.

The public predicate never raises: invalid descriptors are logged and
classified as non-intersecting.
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any

logger = logging.getLogger(__name__)


class InvalidParameterError(ValueError):
    """Raised when a star descriptor or vertex sequence is out of domain."""


def coerce_int(value: Any, name: str) -> int:
    """Return ``value`` as an ``int`` or raise :class:`InvalidParameterError`.

    Integral floats such as ``5.0`` are accepted.  Booleans are not.
    """
    if isinstance(value, bool):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise InvalidParameterError(f"{name} must be an integer, got {value!r}")


def validate_star_descriptor(n: Any, k: Any) -> tuple[int, int]:
    """Validate a star descriptor and return it as a pair of ints.

    Raises:
        InvalidParameterError: If either value is not an integer, if
            ``n < 3`` or if ``k < 1``.
    """
    n_int = coerce_int(n, "n")
    k_int = coerce_int(k, "k")
    if n_int < 3:
        raise InvalidParameterError(f"n must be >= 3, got {n_int}")
    if k_int < 1:
        raise InvalidParameterError(f"k must be >= 1, got {k_int}")
    return n_int, k_int


def normalize_skip(n: int, k: int) -> int:
    """Fold ``k`` into ``(0, n/2]``, mapping a zero remainder to ``n``."""
    k = k % n
    if k > n / 2:
        k = n - k
    if k == 0:
        k = n
    return k


def _classify(n: int, k: int) -> bool:
    k = normalize_skip(n, k)
    d = math.gcd(n, k)
    if d == n:
        return False
    if d == 1:
        return 1 < k < n / 2
    sub_n = n // d
    if sub_n < 3:
        # Sub-figures are single chords.
        return False
    return _classify(sub_n, k // d)


def has_self_intersections(n: Any, k: Any) -> bool:
    """Return True if the star polygon ``{n/k}`` crosses itself.

    Invalid descriptors (non-integers, ``n < 3``, ``k < 1``) are logged
    at warning level and classified as non-intersecting.
    """
    try:
        n_int, k_int = validate_star_descriptor(n, k)
    except InvalidParameterError as exc:
        logger.warning("Invalid star descriptor n=%r k=%r: %s", n, k, exc)
        return False
    return _classify(n_int, k_int)


__all__ = [
    "InvalidParameterError",
    "coerce_int",
    "validate_star_descriptor",
    "normalize_skip",
    "has_self_intersections",
]

"""
Vector factory functions.

These build owned Vectors filled by a rule: constant (`zeros`, `ones`,
`full`), evenly spaced over a closed interval (`linspace`) or stepped over
a half-open one (`arange`, `iota`).
"""

from __future__ import annotations

import math
from typing import Any, Optional

import numpy as np

from ...domain._errors import BadStrideError
from ..storage._owned import OwnedStorage
from ._vector import Vector


def zeros(n: int, dtype: Optional[Any] = None) -> Vector:
    """Owned Vector of ``n`` zeros (float64 unless ``dtype`` is given)."""
    return Vector(n, dtype=dtype)


def ones(n: int, dtype: Optional[Any] = None) -> Vector:
    """Owned Vector of ``n`` ones (float64 unless ``dtype`` is given)."""
    return Vector(n, 1, dtype=np.float64 if dtype is None else dtype)


def full(n: int, value: Any, dtype: Optional[Any] = None) -> Vector:
    """Owned Vector of ``n`` copies of ``value``."""
    return Vector(n, value, dtype=dtype)


def linspace(start: float, stop: float, n: int) -> Vector:
    """
    ``n`` evenly spaced values from ``start`` to ``stop`` inclusive.

    Parameters
    ----------
    start, stop : float
        Interval end points; both are included when ``n >= 2``.
    n : int
        Number of samples. ``n == 1`` gives ``[start]``, ``n == 0`` gives
        an empty Vector.

    Returns
    -------
    Vector
        Owned float64 Vector.
    """
    if n < 0:
        raise ValueError(f"negative vector size: {n}")
    data = np.linspace(start, stop, int(n), dtype=np.float64)
    return Vector._from_storage(OwnedStorage(data))


def arange(start: Any, stop: Any, step: Any = 1) -> Vector:
    """
    Values ``start, start + step, ...`` strictly before ``stop``.

    Parameters
    ----------
    start, stop : int or float
        Half-open interval.
    step : int or float, optional
        Non-zero increment; negative steps count down. Defaults to 1.

    Returns
    -------
    Vector
        Owned Vector of length ``max(0, ceil((stop - start) / step))``;
        int64 for integer arguments, float64 otherwise.

    Raises
    ------
    BadStrideError
        If ``step == 0``.
    """
    if step == 0:
        raise BadStrideError(step)
    n = max(0, math.ceil((stop - start) / step))
    data = start + step * np.arange(n)
    return Vector._from_storage(OwnedStorage(np.asarray(data)))


def iota(start: Any, stop: Any) -> Vector:
    """``arange(start, stop)``: consecutive values from ``start`` up to ``stop``."""
    return arange(start, stop)

"""
Element dtype policy (NumPy backend).

Owned and borrowed storages keep their elements in 1-D NumPy arrays. This
module decides which dtype an array gets and which dtype an expression node
reports:

- numeric and boolean inputs keep the dtype NumPy infers for them;
- anything else (strings, user-defined element types, ragged or nested
  input) is stored with ``dtype=object`` so that elements are kept as the
  original Python objects and never truncated or split;
- a node's dtype is the dtype of its read expression evaluated once on
  probe values (ones of each operand dtype). Only the built-in kernels
  (``operator`` arithmetic, ``abs`` and NumPy ufuncs) are probed; any
  other function, and any object-typed operand, gives ``object``. User
  functions are therefore only ever called on real elements.
"""

from __future__ import annotations

import builtins
import operator
from typing import Any, Callable, Iterable, Optional

import numpy as np

OBJECT = np.dtype(object)
DEFAULT = np.dtype(np.float64)

_NUMERIC_KINDS = "biufc"

_NO_SAMPLE = object()

_PROBED_KERNELS = frozenset(
    {
        operator.add,
        operator.sub,
        operator.mul,
        operator.truediv,
        operator.neg,
        builtins.abs,
    }
)


def is_numeric(dtype: np.dtype) -> bool:
    return np.dtype(dtype).kind in _NUMERIC_KINDS


def is_probed_kernel(fn: Callable[..., Any]) -> bool:
    """Return True if ``fn`` is a built-in kernel safe to call on probe values."""
    if isinstance(fn, np.ufunc):
        return True
    try:
        return fn in _PROBED_KERNELS
    except TypeError:
        return False


def dtype_of(expr: Any) -> np.dtype:
    """Return the element dtype reported by ``expr`` (``object`` if it reports none)."""
    dt = getattr(expr, "dtype", None)
    if dt is None:
        return OBJECT
    try:
        return np.dtype(dt)
    except TypeError:
        return OBJECT


def as_element_array(values: Iterable[Any], dtype: Optional[Any] = None) -> np.ndarray:
    """
    Copy ``values`` into a fresh 1-D array.

    Parameters
    ----------
    values : Iterable[Any]
        Elements in order.
    dtype : optional
        Explicit element dtype. When omitted, numeric input keeps NumPy's
        inferred dtype and everything else becomes ``object``.

    Returns
    -------
    np.ndarray
        A new array of length ``len(values)``.
    """
    values = list(values)

    if dtype is not None:
        dtype = np.dtype(dtype)
        if dtype == OBJECT:
            return _object_array(values)
        return np.array(values, dtype=dtype).reshape(len(values))

    try:
        arr = np.array(values)
    except (TypeError, ValueError):
        arr = None

    if arr is None or arr.ndim != 1 or arr.dtype.kind not in _NUMERIC_KINDS:
        return _object_array(values)
    return arr


def _object_array(values: list) -> np.ndarray:
    # element-wise so NumPy never descends into sequence-like elements
    arr = np.empty(len(values), dtype=object)
    for i, v in enumerate(values):
        arr[i] = v
    return arr


def dtype_for_value(value: Any) -> np.dtype:
    """Return the storage dtype a single fill value calls for."""
    return as_element_array([value]).dtype


def sample(dtype: np.dtype) -> Any:
    """Return a probe value of ``dtype``, or a sentinel for object dtypes."""
    if not is_numeric(dtype):
        return _NO_SAMPLE
    return np.ones(1, dtype=dtype)[0]


def scalar_sample(value: Any) -> Any:
    """Return ``value`` itself as a probe, or a sentinel if it is not numeric."""
    if isinstance(value, (bool, int, float, complex, np.number, np.bool_)):
        return value
    return _NO_SAMPLE


def result_dtype(fn: Callable[..., Any], *samples: Any) -> np.dtype:
    """
    Derive the dtype of ``fn(*operands)`` from probe samples.

    Parameters
    ----------
    fn : Callable
        The element-wise operation of a node.
    *samples : Any
        One probe per operand, built with `sample` or `scalar_sample`.

    Returns
    -------
    np.dtype
        The numeric dtype of the probe result, or ``object``.

    Notes
    -----
    ``fn`` is called only if it is one of the built-in kernels (see
    `is_probed_kernel`); user-supplied functions are never run on made-up
    inputs and report ``object``.
    """
    if not is_probed_kernel(fn):
        return OBJECT
    if any(s is _NO_SAMPLE for s in samples):
        return OBJECT

    with np.errstate(all="ignore"):
        try:
            out = np.asarray(fn(*samples))
        except (TypeError, ValueError, ArithmeticError):
            return OBJECT

    if out.ndim != 0 or out.dtype.kind not in _NUMERIC_KINDS:
        return OBJECT
    return out.dtype

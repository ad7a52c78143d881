"""
Fusing assignment.

`fused_assign` is the single place where expression trees are evaluated. It
drives one ascending index loop over the right-hand side and writes each
element straight into the destination backing:

1. ``n = rhs.size()``
2. a non-resizable destination whose length differs raises
   `SizeMismatchError` before anything is written;
3. a resizable destination whose length is 0 or differs from ``n`` is
   resized to ``n`` (adopting the right-hand side dtype if it has none yet);
4. ``for i in range(n): dst.set(i, rhs.get(i))``.

There is no aliasing protection: when the right-hand side reads the
destination, element ``i`` sees every write made for indices below ``i``.

The one exception is an object-typed right-hand side (strings, user types,
results of user functions) assigned into numeric storage. Its elements are
read in the same ascending order into a staging array and converted to the
destination dtype before the first write, so a failed conversion leaves
the destination untouched.
"""

from __future__ import annotations

import warnings

import numpy as np

from ...domain._errors import SizeMismatchError
from ...domain._expression import IExpression, IStorage
from ..storage._dtype import dtype_of, is_numeric


def _warn_if_lossy(src_dt: np.dtype, dst_dt: np.dtype) -> None:
    if not (is_numeric(src_dt) and is_numeric(dst_dt)):
        return
    if not np.can_cast(src_dt, dst_dt, casting="same_kind"):
        warnings.warn(
            f"assigning a {src_dt} expression into {dst_dt} storage; "
            "values will be cast and may lose information.",
            RuntimeWarning,
            stacklevel=3,
        )


def _stage(rhs: IExpression, n: int, dtype: np.dtype) -> np.ndarray:
    staged = np.empty(n, dtype=object)
    get = rhs.get
    for i in range(n):
        staged[i] = get(i)
    # raises TypeError / ValueError for elements the dtype cannot hold
    return staged.astype(dtype)


def fused_assign(dst: IStorage, rhs: IExpression) -> None:
    """
    Evaluate ``rhs`` element by element into ``dst``.

    Parameters
    ----------
    dst : IStorage
        Destination backing. Must provide ``set``; owned backings may be
        resized.
    rhs : IExpression
        Source expression (storage, view or node tree).

    Raises
    ------
    SizeMismatchError
        If ``dst`` cannot be resized and its length differs from ``rhs``.
    StorageCapabilityError
        If ``dst`` cannot be written.
    TypeError, ValueError
        If an object-typed ``rhs`` holds elements that the numeric dtype of
        ``dst`` cannot represent. Nothing is written in that case.
    """
    n = rhs.size()
    m = dst.size()

    if not dst.resizable and m != n:
        raise SizeMismatchError("assign", m, n)

    src_dt = dtype_of(rhs)
    # an uncommitted destination adopts the source dtype on resize
    dst_dt = dtype_of(dst) if getattr(dst, "committed", True) else src_dt

    staged = None
    if is_numeric(dst_dt) and not is_numeric(src_dt):
        staged = _stage(rhs, n, dst_dt)
    else:
        _warn_if_lossy(src_dt, dst_dt)

    if dst.resizable and (m == 0 or m != n):
        dst.resize(n, dtype=src_dt)

    put = dst.set
    if staged is not None:
        for i in range(n):
            put(i, staged[i])
        return

    get = rhs.get
    for i in range(n):
        put(i, get(i))

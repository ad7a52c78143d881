"""
Vector memory / assignment mixin.

This module defines `VectorMixinMemory`, the mixin that moves data into and
out of a Vector:

- fusing assignment (`assign`) and `fill`;
- adopting caller memory (`from_buffer`, `set_buffer`) and wrapping
  arbitrary expressions (`from_expression`);
- resizing, raw buffer access (`buffer`, `data_ptr`);
- materialisation (`copy`, `to_numpy`, `to_list`, ``numpy.asarray(v)``).

Notes
-----
- `assign` is the flush point of the lazy operator surface: it is the only
  method that evaluates an expression tree, via `fused_assign`.
- Capabilities are checked against the backing: writing into an
  expression-typed Vector raises `StorageCapabilityError`, resizing a
  borrowed or strided one raises `ResizeUnsupportedError`.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, List, Optional

import numpy as np
from typing_extensions import Self

from .....domain._errors import ResizeUnsupportedError
from .....domain._expression import IExpression
from ....expr._evaluate import fused_assign
from ....storage._borrowed import (
    BorrowedStorage,
    ReadOnlyBorrowedStorage,
    borrow_array,
)
from ....storage._owned import OwnedStorage
from ..._operands import expression_of


def _borrow(buffer: Any, n: Optional[int]) -> IExpression:
    arr = borrow_array(buffer, n)
    if arr.flags.writeable:
        return BorrowedStorage(arr)
    return ReadOnlyBorrowedStorage(arr)


class VectorMixinMemory(ABC):
    """
    Assignment, buffer adoption and materialisation for vectors.

    This mixin assumes the host class provides `_storage`, `_from_storage`
    and `_require` (see `VectorCoreMixin`).
    """

    # ----------------------------
    # Construction from external sources
    # ----------------------------
    @classmethod
    def from_buffer(cls, buffer: Any, n: Optional[int] = None) -> Self:
        """
        Build a Vector that borrows caller memory without copying.

        Parameters
        ----------
        buffer : Any
            A 1-D NumPy array or any buffer-protocol object.
        n : Optional[int]
            Number of leading elements to adopt. Defaults to all of them.

        Returns
        -------
        Vector
            Borrowed Vector; read-only if the memory is not writeable.

        Notes
        -----
        The caller keeps ownership and must keep the memory alive for as long
        as the Vector (or any view or expression over it) is used.
        """
        return cls._from_storage(_borrow(buffer, n))

    @classmethod
    def from_expression(cls, expr: Any) -> Self:
        """
        Wrap any object with ``size()`` and ``get(i)`` as an expression Vector.

        Raises
        ------
        TypeError
            If ``expr`` does not provide ``size`` and ``get``.
        """
        source = expression_of(expr, "from_expression")
        if source is None:
            raise TypeError(
                f"{type(expr).__name__} does not provide size() and get(i)"
            )
        return cls._from_storage(source)

    def set_buffer(self, buffer: Any, n: Optional[int] = None) -> Self:
        """
        Switch this Vector to borrowed storage over ``buffer``.

        The previous backing is released by this Vector; views created from
        it earlier keep referencing it.
        """
        self._storage = _borrow(buffer, n)
        return self

    # ----------------------------
    # Writes
    # ----------------------------
    def assign(self, rhs: Any) -> Self:
        """
        Evaluate ``rhs`` into this Vector with one fused loop.

        Parameters
        ----------
        rhs : Vector, IExpression or scalar
            Source. A scalar fills every element without changing the length.

        Returns
        -------
        Vector
            ``self``.

        Raises
        ------
        SizeMismatchError
            If this Vector cannot be resized and its length differs from
            ``rhs``.
        StorageCapabilityError
            If this Vector is expression-typed or read-only.
        TypeError
            If ``rhs`` is a list or NumPy array.
        """
        source = expression_of(rhs, "assign")
        if source is None:
            return self.fill(rhs)

        self._require("set", "write")
        fused_assign(self._storage, source)
        return self

    def fill(self, value: Any) -> Self:
        """Write ``value`` into every element."""
        self._require("fill", "write")(value)
        return self

    def resize(self, n: int) -> Self:
        """
        Change the length of an owned Vector, keeping the common prefix.

        Raises
        ------
        ResizeUnsupportedError
            If the backing is borrowed, strided or an expression.
        """
        if not self.resizable:
            raise ResizeUnsupportedError(str(self.kind))
        self._storage.resize(n)
        return self

    # ----------------------------
    # Raw access
    # ----------------------------
    @property
    def buffer(self) -> np.ndarray:
        """The contiguous NumPy array behind an owned or borrowed Vector."""
        return self._require("buffer", "buffer")

    def data_ptr(self) -> int:
        """Address of element 0 of an owned or borrowed Vector."""
        return self._require("data_ptr", "data_ptr")()

    # ----------------------------
    # Materialisation
    # ----------------------------
    def to_numpy(self) -> np.ndarray:
        """
        Return a new NumPy array holding the current element values.

        Contiguous backings are copied directly; views and expressions are
        evaluated element by element into an array of `dtype`.
        """
        buf = getattr(self._storage, "buffer", None)
        if buf is not None:
            return buf.copy()

        n = self.size()
        get = self._storage.get
        out = np.empty(n, dtype=self.dtype)
        for i in range(n):
            out[i] = get(i)
        return out

    def to_list(self) -> List[Any]:
        """Return the elements as a list of plain Python values."""
        return [x.item() if isinstance(x, np.generic) else x for x in self]

    def copy(self) -> Self:
        """Return an owned Vector holding a copy of the current elements."""
        return type(self)._from_storage(OwnedStorage(self.to_numpy()))

    def __array__(self, dtype: Any = None, copy: Optional[bool] = None) -> np.ndarray:
        buf = getattr(self._storage, "buffer", None)
        if buf is not None and not copy:
            arr = buf
        elif copy is False:
            raise ValueError(
                f"a {self.kind} Vector cannot be exposed as an array without copying"
            )
        else:
            arr = self.to_numpy()

        if dtype is not None and np.dtype(dtype) != arr.dtype:
            if copy is False:
                raise ValueError("dtype conversion requires a copy")
            arr = arr.astype(dtype)
        return arr



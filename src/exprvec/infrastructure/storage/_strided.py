"""
Strided view storage.

`StridedStorage` exposes every ``step``-th element of a parent backing
between ``start`` and ``end``. It never owns memory: reads and writes are
forwarded to the parent at ``start + i * step``. The parent may be any
storage or expression node; the view is writable only if the parent is.

The computed parent index is not re-validated. Out-of-range accesses are
left to the parent's own bounds policy.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ...domain._errors import (
    BadStrideError,
    ResizeUnsupportedError,
    StorageCapabilityError,
)
from ...domain._expression import IExpression
from ...domain._slice import ResolvedSlice
from ...domain._storage_kind import StorageKind
from ._dtype import dtype_of


class StridedStorage:
    """
    View over a parent backing with a fixed start, end and step.

    Parameters
    ----------
    parent : IExpression
        Backing being viewed. Held by reference.
    start : int
        Parent index of view element 0.
    end : int
        Exclusive bound (-1 with a negative step means "before index 0").
    step : int
        Non-zero stride.

    Raises
    ------
    BadStrideError
        If ``step == 0``.
    """

    __slots__ = ("_parent", "_start", "_end", "_step", "_length", "_pget", "_pset")

    kind = StorageKind.STRIDED
    resizable = False

    def __init__(self, parent: IExpression, start: int, end: int, step: int) -> None:
        if step == 0:
            raise BadStrideError(step)
        self._parent = parent
        self._start = int(start)
        self._end = int(end)
        self._step = int(step)
        self._length = ResolvedSlice(self._start, self._end, self._step).length
        self._pget = parent.get
        self._pset = getattr(parent, "set", None)

    @classmethod
    def from_slice(cls, parent: IExpression, resolved: ResolvedSlice) -> "StridedStorage":
        return cls(parent, resolved.start, resolved.end, resolved.step)

    @property
    def parent(self) -> IExpression:
        return self._parent

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def step(self) -> int:
        return self._step

    @property
    def dtype(self) -> np.dtype:
        return dtype_of(self._parent)

    def size(self) -> int:
        return self._length

    def get(self, i: int) -> Any:
        return self._pget(self._start + i * self._step)

    def set(self, i: int, value: Any) -> None:
        if self._pset is None:
            raise StorageCapabilityError("write", str(getattr(self._parent, "kind", "expression")))
        self._pset(self._start + i * self._step, value)

    def fill(self, value: Any) -> None:
        for i in range(self._length):
            self.set(i, value)

    def resize(self, n: int, dtype: Optional[Any] = None) -> None:
        raise ResizeUnsupportedError(str(self.kind))

    def __repr__(self) -> str:
        return (
            f"StridedStorage(start={self._start}, end={self._end}, "
            f"step={self._step}, size={self._length})"
        )

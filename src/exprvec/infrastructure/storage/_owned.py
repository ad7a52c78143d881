"""
Owned contiguous storage (NumPy backend).

`OwnedStorage` is the default backing of a Vector. It owns a 1-D NumPy
array and is the only storage kind that can change length. Resizing
allocates a new array, so raw pointers previously obtained through
`data_ptr()` are invalidated, while views and expression nodes stay valid
because they hold the storage object rather than its array.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

import numpy as np

from ...domain._storage_kind import StorageKind
from ._dtype import DEFAULT, as_element_array, dtype_for_value


class OwnedStorage:
    """
    Resizable contiguous storage owning a NumPy array.

    Parameters
    ----------
    data : np.ndarray
        1-D array adopted as the backing buffer (not copied).
    committed : bool, optional
        Whether the element dtype is fixed. An uncommitted storage is empty
        and adopts the dtype passed to its first `resize`. Defaults to True.

    Notes
    -----
    Use the `empty`, `sized` and `from_values` constructors rather than
    calling the initializer with a hand-built array.
    """

    __slots__ = ("_data", "_committed")

    kind = StorageKind.OWNED
    resizable = True

    def __init__(self, data: np.ndarray, *, committed: bool = True) -> None:
        if data.ndim != 1:
            raise ValueError(f"storage arrays must be 1-D, got shape {data.shape}")
        self._data = data
        self._committed = committed

    @classmethod
    def empty(cls, dtype: Optional[Any] = None) -> "OwnedStorage":
        """Zero-length storage; uncommitted unless ``dtype`` is given."""
        if dtype is None:
            return cls(np.empty(0, dtype=DEFAULT), committed=False)
        return cls(np.empty(0, dtype=np.dtype(dtype)))

    @classmethod
    def sized(
        cls, n: int, fill: Any = None, *, has_fill: bool = False, dtype: Optional[Any] = None
    ) -> "OwnedStorage":
        """
        Storage of length ``n``.

        Parameters
        ----------
        n : int
            Number of elements; must be non-negative.
        fill : Any, optional
            Initial value of every element (only used when ``has_fill``).
        has_fill : bool, optional
            Whether ``fill`` was supplied. Without a fill the elements are the
            dtype's zero.
        dtype : optional
            Element dtype. Defaults to float64 without a fill, or the dtype the
            fill value calls for.
        """
        n = int(n)
        if n < 0:
            raise ValueError(f"negative vector size: {n}")

        if not has_fill:
            dt = DEFAULT if dtype is None else np.dtype(dtype)
            return cls(np.zeros(n, dtype=dt), committed=dtype is not None or n > 0)

        dt = dtype_for_value(fill) if dtype is None else np.dtype(dtype)
        data = np.empty(n, dtype=dt)
        storage = cls(data)
        storage.fill(fill)
        return storage

    @classmethod
    def from_values(cls, values: Iterable[Any], dtype: Optional[Any] = None) -> "OwnedStorage":
        """Storage holding a copy of ``values``."""
        data = as_element_array(values, dtype)
        return cls(data, committed=dtype is not None or data.size > 0)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def committed(self) -> bool:
        """Whether the element dtype is fixed (False only for a fresh empty storage)."""
        return self._committed

    @property
    def buffer(self) -> np.ndarray:
        """The backing array (shared, not copied)."""
        return self._data

    def data_ptr(self) -> int:
        """Address of the first element of the backing array."""
        return int(self._data.ctypes.data)

    def size(self) -> int:
        return self._data.shape[0]

    def get(self, i: int) -> Any:
        return self._data[i]

    def set(self, i: int, value: Any) -> None:
        self._data[i] = value

    def fill(self, value: Any) -> None:
        if self._data.dtype.kind == "O":
            # object slots take the value as-is, even if it is sequence-like
            for i in range(self._data.shape[0]):
                self._data[i] = value
        else:
            self._data.fill(value)

    def resize(self, n: int, dtype: Optional[Any] = None) -> None:
        """
        Change the length to ``n``, keeping the common prefix.

        Parameters
        ----------
        n : int
            New length.
        dtype : optional
            Element dtype adopted if the storage is still uncommitted; ignored
            otherwise.

        Notes
        -----
        New slots hold the dtype's zero (``0`` for object arrays).
        """
        n = int(n)
        if n < 0:
            raise ValueError(f"negative vector size: {n}")

        dt = self._data.dtype
        if not self._committed and dtype is not None:
            dt = np.dtype(dtype)

        if n == self._data.shape[0] and dt == self._data.dtype:
            return

        new = np.zeros(n, dtype=dt)
        keep = min(n, self._data.shape[0])
        new[:keep] = self._data[:keep]
        self._data = new
        self._committed = self._committed or n > 0

    def __repr__(self) -> str:
        return f"OwnedStorage(size={self.size()}, dtype={self.dtype})"

"""
Borrowed contiguous storages (NumPy backend).

A borrowed storage adopts memory supplied by the caller: a 1-D NumPy array
or any object exposing the buffer protocol (``array.array``, ``bytearray``,
``memoryview`` ...). The memory is wrapped without copying, so writes made
through the Vector are visible to the provider and vice versa.

Two classes exist so that read-only and mutable borrows are distinct types:

- `BorrowedStorage` requires writable memory and writes through it.
- `ReadOnlyBorrowedStorage` accepts any memory and rejects every write.

Neither can change length. The caller must keep the memory alive and must
not reallocate it while a Vector borrows it.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ...domain._errors import ReadOnlyStorageError, ResizeUnsupportedError
from ...domain._storage_kind import StorageKind


def borrow_array(buffer: Any, n: Optional[int] = None) -> np.ndarray:
    """
    Wrap caller memory as a 1-D NumPy array without copying.

    Parameters
    ----------
    buffer : Any
        A NumPy array or an object exposing the buffer protocol.
    n : Optional[int]
        Number of leading elements to adopt. Defaults to the whole buffer.

    Returns
    -------
    np.ndarray
        A view sharing memory with ``buffer``.

    Raises
    ------
    TypeError
        If ``buffer`` does not expose memory (e.g., a Python list, which
        could only be copied).
    ValueError
        If the memory is not 1-D or ``n`` exceeds its length.
    """
    if isinstance(buffer, np.ndarray):
        arr = buffer
    else:
        try:
            view = memoryview(buffer)
        except TypeError:
            raise TypeError(
                f"cannot borrow memory from {type(buffer).__name__}; "
                "pass a NumPy array or a buffer-protocol object"
            ) from None
        arr = np.asarray(view)

    if arr.ndim != 1:
        raise ValueError(f"borrowed buffers must be 1-D, got shape {arr.shape}")

    if n is not None:
        n = int(n)
        if n < 0 or n > arr.shape[0]:
            raise ValueError(
                f"cannot borrow {n} elements from a buffer of length {arr.shape[0]}"
            )
        arr = arr[:n]
    return arr


class BorrowedStorage:
    """
    Writable view of caller-supplied memory.

    Parameters
    ----------
    buffer : Any
        Writable 1-D NumPy array or buffer-protocol object.
    n : Optional[int]
        Number of leading elements to adopt.

    Raises
    ------
    ReadOnlyStorageError
        If the memory is not writable; use `ReadOnlyBorrowedStorage` instead.
    """

    __slots__ = ("_data",)

    kind = StorageKind.BORROWED
    resizable = False

    def __init__(self, buffer: Any, n: Optional[int] = None) -> None:
        arr = borrow_array(buffer, n)
        if not arr.flags.writeable:
            raise ReadOnlyStorageError(str(self.kind), op="mutable borrow")
        self._data = arr

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def buffer(self) -> np.ndarray:
        return self._data

    def data_ptr(self) -> int:
        return int(self._data.ctypes.data)

    def size(self) -> int:
        return self._data.shape[0]

    def get(self, i: int) -> Any:
        return self._data[i]

    def set(self, i: int, value: Any) -> None:
        self._data[i] = value

    def fill(self, value: Any) -> None:
        if self._data.dtype.kind == "O":
            for i in range(self._data.shape[0]):
                self._data[i] = value
        else:
            self._data[...] = value

    def resize(self, n: int, dtype: Optional[Any] = None) -> None:
        raise ResizeUnsupportedError(str(self.kind))

    def __repr__(self) -> str:
        return f"BorrowedStorage(size={self.size()}, dtype={self.dtype})"


class ReadOnlyBorrowedStorage:
    """
    Read-only view of caller-supplied memory.

    The wrapped array is a non-writeable NumPy view, so even code that
    reaches `buffer` directly cannot write through it.
    """

    __slots__ = ("_data",)

    kind = StorageKind.BORROWED_READONLY
    resizable = False

    def __init__(self, buffer: Any, n: Optional[int] = None) -> None:
        arr = borrow_array(buffer, n).view()
        arr.flags.writeable = False
        self._data = arr

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def buffer(self) -> np.ndarray:
        return self._data

    def data_ptr(self) -> int:
        return int(self._data.ctypes.data)

    def size(self) -> int:
        return self._data.shape[0]

    def get(self, i: int) -> Any:
        return self._data[i]

    def set(self, i: int, value: Any) -> None:
        raise ReadOnlyStorageError(str(self.kind))

    def fill(self, value: Any) -> None:
        raise ReadOnlyStorageError(str(self.kind))

    def resize(self, n: int, dtype: Optional[Any] = None) -> None:
        raise ResizeUnsupportedError(str(self.kind))

    def __repr__(self) -> str:
        return f"ReadOnlyBorrowedStorage(size={self.size()}, dtype={self.dtype})"

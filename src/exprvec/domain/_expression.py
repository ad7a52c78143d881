"""
Expression and storage interface definitions.

This module defines the structural contracts shared by every Vector
backing. Using `typing.Protocol` (structural typing) lets owned buffers,
borrowed buffers, strided views, lazy expression nodes and user-defined
sources participate in the same expressions without a common base class.

Two layers are defined:

- `IExpression`: anything with an indexed read and a length. This is the
  minimal contract consumed by expression nodes and by the fusing
  assignment.
- `IStorage`: an `IExpression` that can also be written to and that reports
  its element dtype, kind and whether it can change length.

Notes
-----
Optional members such as `dtype` and `kind` are read with `getattr` and a
default by the infrastructure layer, so a user-defined `IExpression` only
has to provide `size()` and `get(i)`.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Union, runtime_checkable

import numpy as np

from ._storage_kind import StorageKind

Number = Union[int, float, complex]


@runtime_checkable
class IExpression(Protocol):
    """
    Indexed-read contract.

    An `IExpression` produces the element at index ``i`` on demand. Nodes
    never materialise whole results; `get` is the only evaluation entry
    point.
    """

    def size(self) -> int:
        """
        Return the logical length.

        Returns
        -------
        int
            Number of readable elements.
        """
        ...

    def get(self, i: int) -> Any:
        """
        Return the element at index ``i``.

        Parameters
        ----------
        i : int
            Index in ``[0, size())``. Implementations do not re-validate it.

        Returns
        -------
        Any
            The element value (by value, never a reference into storage).
        """
        ...


@runtime_checkable
class IStorage(IExpression, Protocol):
    """
    Writable backing contract.

    Owned buffers, borrowed buffers and strided views satisfy this protocol.
    Read-only borrowed buffers satisfy it structurally but raise on writes.
    """

    @property
    def dtype(self) -> np.dtype:
        """Element dtype of the backing."""
        ...

    @property
    def kind(self) -> StorageKind:
        """Category of the backing."""
        ...

    @property
    def resizable(self) -> bool:
        """Whether `resize` can change the length."""
        ...

    def set(self, i: int, value: Any) -> None:
        """
        Write ``value`` at index ``i``.

        Raises
        ------
        ReadOnlyStorageError
            If the backing is read-only.
        """
        ...

    def fill(self, value: Any) -> None:
        """Write ``value`` to every element; the length is unchanged."""
        ...

    def resize(self, n: int, dtype: Optional[np.dtype] = None) -> None:
        """
        Change the length to ``n``.

        Raises
        ------
        ResizeUnsupportedError
            If the backing does not own its memory.
        """
        ...

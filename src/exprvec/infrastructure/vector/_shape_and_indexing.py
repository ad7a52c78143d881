"""
Vector length, iteration and indexing mixin.

This module defines `VectorShapeAndIndexingMixin`, which implements the
subscript surface of `Vector`:

- ``v[i]`` / ``v[i] = x``: single element, negative ``i`` wrapped once and
  bounds checked;
- ``v[s, e]``, ``v[s, e, k]``, ``v[a:b:c]``, ``v[_]``: strided views that
  read and write through to ``v``;
- ``v[...] = rhs``: fusing assignment into ``v`` itself (may resize an
  owned ``v``).

Design notes
------------
- Views are Vectors backed by `StridedStorage` and never copy. Writing to a
  view (``v[0, _, 2] = rhs``) never resizes; lengths must match.
- New Vectors are built via ``type(self)._from_storage`` so this mixin never
  imports `Vector`.
"""

from __future__ import annotations

import operator
from typing import Any, Iterator

from typing_extensions import Self

from ...domain._slice import SliceSpec, is_slice_key
from ..storage._strided import StridedStorage


class VectorShapeAndIndexingMixin:
    """
    Indexing and slicing for the concrete Vector implementation.

    Notes
    -----
    Methods assume the host class provides `_storage`, `size`, `kind`,
    `assign`, `_from_storage` and `_require`.
    """

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Any]:
        get = self._storage.get
        for i in range(self.size()):
            yield get(i)

    def _checked_index(self, key: Any) -> int:
        try:
            i = operator.index(key)
        except TypeError:
            raise TypeError(
                f"Vector indices must be integers, slices, tuples or _, "
                f"not {type(key).__name__}"
            ) from None

        n = self.size()
        if i < 0:
            i += n
        if i < 0 or i >= n:
            raise IndexError(f"index {key} is out of range for a Vector of length {n}")
        return i

    def view(self, key: Any) -> Self:
        """
        Return a strided view selected by ``key``.

        Parameters
        ----------
        key : tuple, slice or _
            ``(start, end)``, ``(start, end, step)``, a Python slice or `_`.

        Returns
        -------
        Vector
            Strided Vector over this one's backing.

        Raises
        ------
        BadStrideError
            If the step is 0.
        IndexError
            If a negative bound must be wrapped against an empty vector.
        """
        resolved = SliceSpec.from_key(key).resolve(self.size())
        return type(self)._from_storage(StridedStorage.from_slice(self._storage, resolved))

    def __getitem__(self, key: Any) -> Any:
        """
        Read one element or build a view.

        Integer keys return the element value; slice keys (see `view`) and
        ``...`` return a strided Vector.
        """
        if key is Ellipsis:
            return self.view(slice(None))
        if is_slice_key(key):
            return self.view(key)
        return self._storage.get(self._checked_index(key))

    def __setitem__(self, key: Any, value: Any) -> None:
        """
        Write one element, a view, or (with ``...``) the whole Vector.

        ``v[...] = rhs`` is `assign` and may resize an owned ``v``;
        ``v[key] = rhs`` for a slice key writes through a view of fixed
        length, and a scalar ``rhs`` fills the selected elements.
        """
        if key is Ellipsis:
            self.assign(value)
        elif is_slice_key(key):
            self.view(key).assign(value)
        else:
            i = self._checked_index(key)
            self._require("set", "write")(i, value)

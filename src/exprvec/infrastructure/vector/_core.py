"""
Core state shared by every Vector mixin.

`VectorCoreMixin` holds the one piece of state a Vector has, its backing
(an owned, borrowed or strided storage, or an expression node), and the
read-only accessors derived from it. The other mixins build on these
accessors and never touch the backing's attributes directly.

Design notes
------------
- New Vectors are created through `_from_storage` on ``type(self)`` so the
  mixins never import the concrete `Vector` class.
- Capabilities a backing may lack (``set``, ``resize``, ``buffer``,
  ``data_ptr``) are looked up with `_require`, which raises
  `StorageCapabilityError` naming the operation and the backing kind.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from typing_extensions import Self

from ...domain._errors import StorageCapabilityError
from ...domain._expression import IExpression
from ...domain._storage_kind import StorageKind
from ..storage._dtype import dtype_of


class VectorCoreMixin:
    """
    Backing holder and basic accessors for `Vector`.

    Attributes
    ----------
    _storage : IExpression
        The backing. Storages expose ``set``; expression nodes do not.
    """

    _storage: IExpression

    @classmethod
    def _from_storage(cls, storage: IExpression) -> Self:
        """Wrap an existing backing without copying or validating it."""
        obj = cls.__new__(cls)
        obj._storage = storage
        return obj

    def _require(self, attr: str, op: str) -> Callable[..., Any]:
        member = getattr(self._storage, attr, None)
        if member is None:
            raise StorageCapabilityError(op, str(self.kind))
        return member

    @property
    def storage(self) -> IExpression:
        """The backing object (shared, not copied)."""
        return self._storage

    @property
    def kind(self) -> StorageKind:
        return getattr(self._storage, "kind", StorageKind.EXPRESSION)

    @property
    def dtype(self) -> np.dtype:
        return dtype_of(self._storage)

    @property
    def resizable(self) -> bool:
        return bool(getattr(self._storage, "resizable", False))

    def size(self) -> int:
        return self._storage.size()

    def get(self, i: int) -> Any:
        """Unchecked read of element ``i`` (no negative wrap)."""
        return self._storage.get(i)

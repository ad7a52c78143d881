"""
Reduction mixin for vectors.

:class:`VectorMixinReduction` provides the reductions that walk every
element once: ``sum`` (a left fold seeded with element 0) and ``count``.
Both read through `get`, so they work on owned, borrowed, strided and
expression-typed Vectors alike, evaluating an expression exactly once per
element.
"""

from __future__ import annotations

from abc import ABC
from typing import Any

from .....domain._errors import EmptyReductionError


class VectorMixinReduction(ABC):
    """
    Element reductions for vectors.

    Notes
    -----
    ``sum`` has no identity element: it starts from element 0 so that
    element types without a zero (strings, user objects) can be summed.
    An empty vector therefore raises `EmptyReductionError`.
    """

    def sum(self) -> Any:
        """
        Left fold with ``+``: ``((v[0] + v[1]) + v[2]) + ...``.

        Returns
        -------
        Any
            The accumulated value, of the element type.

        Raises
        ------
        EmptyReductionError
            If the vector has no elements.
        """
        n = self.size()
        if n == 0:
            raise EmptyReductionError("sum")

        get = self.storage.get
        acc = get(0)
        for i in range(1, n):
            acc = acc + get(i)
        return acc

    def count(self, value: Any) -> int:
        """
        Count the elements equal to ``value``.

        Parameters
        ----------
        value : Any
            Value compared with ``==`` against each element.

        Returns
        -------
        int
            Number of indices ``i`` with ``v[i] == value``.
        """
        get = self.storage.get
        return sum(1 for i in range(self.size()) if get(i) == value)

"""
Concrete Vector implementation (NumPy backend).

`Vector` is the user-facing container. It owns no data itself: it holds a
backing (see `exprvec.infrastructure.storage`) or a lazy expression node
(see `exprvec.infrastructure.expr`) and delegates to it. The operator
surface, assignment, indexing and reductions are provided by mixins:

- `VectorCoreMixin`: backing and basic accessors;
- `VectorShapeAndIndexingMixin`: ``len``, iteration, ``v[i]``, views;
- `VectorMixinArithmetic`: lazy ``+ - * /``;
- `VectorMixinUnary`: ``-v``, ``abs(v)`` and math methods;
- `VectorMixinReduction`: ``sum``, ``count``;
- `VectorMixinMemory`: ``assign``, buffers, materialisation.

Design notes
------------
- ``__array_ufunc__ = None`` makes NumPy defer to the Vector's reflected
  operators, so ``np.float64(2.0) * v`` builds a scalar node instead of
  NumPy trying to broadcast over the Vector.
- Vectors compare by identity; use ``v.to_list() == [...]`` or
  ``v.count(x)`` to compare contents.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, Iterable, Optional, Union

from ...domain._expression import IExpression
from ..expr._evaluate import fused_assign
from ..storage._owned import OwnedStorage
from ._core import VectorCoreMixin
from ._formatting import format_elements, format_vector_repr
from ._operands import expression_of, is_expression
from ._shape_and_indexing import VectorShapeAndIndexingMixin
from .mixins.arithmetic import VectorMixinArithmetic
from .mixins.memory import VectorMixinMemory
from .mixins.reduction import VectorMixinReduction
from .mixins.unary import VectorMixinUnary

_NO_FILL = object()


class Vector(
    VectorCoreMixin,
    VectorShapeAndIndexingMixin,
    VectorMixinArithmetic,
    VectorMixinUnary,
    VectorMixinReduction,
    VectorMixinMemory,
):
    """
    One-dimensional container with lazy, fused element-wise expressions.

    Parameters
    ----------
    data : None, int, iterable or expression, optional
        - omitted: an empty owned Vector whose dtype is taken from the first
          expression assigned to it;
        - ``int`` n: an owned Vector of length n, zero-filled unless ``fill``
          is given;
        - a Vector or other expression: an owned Vector holding its
          evaluated elements;
        - any other iterable: an owned Vector holding a copy of its elements.
    fill : Any, optional
        Initial value of every element when ``data`` is a length.
    dtype : optional
        Element dtype. Defaults to float64 for sized Vectors and to the dtype
        inferred from the elements otherwise (``object`` for non-numeric
        elements).

    Raises
    ------
    TypeError
        If ``fill`` is given without a length, or ``data`` is a string.
    ValueError
        If the length is negative.

    Notes
    -----
    ``Vector(n)`` is float64, so it cannot receive strings or other
    non-numeric elements. A sized Vector meant to hold them needs a fill
    value of that kind (``Vector(5, "")``) or ``dtype=object``
    (``Vector(5, dtype=object)``).

    Examples
    --------
    >>> a = Vector([1.0, 2.0, 3.0])
    >>> b = Vector(3, 1.0)
    >>> c = Vector()
    >>> c.assign(a + 0.5 * a + 0.5 * b).to_list()
    [2.0, 3.5, 5.0]
    """

    __array_ufunc__ = None

    def __init__(
        self,
        data: Union[None, int, Iterable[Any], IExpression] = None,
        fill: Any = _NO_FILL,
        *,
        dtype: Optional[Any] = None,
    ) -> None:
        has_fill = fill is not _NO_FILL

        if isinstance(data, Integral) and not isinstance(data, bool):
            self._storage = OwnedStorage.sized(
                int(data), fill, has_fill=has_fill, dtype=dtype
            )
            return

        if has_fill:
            raise TypeError("fill is only accepted together with an integer length")

        if data is None:
            self._storage = OwnedStorage.empty(dtype)
            return

        if isinstance(data, str):
            raise TypeError("cannot build a Vector from a str; pass [s] for one element")

        if is_expression(data):
            storage = OwnedStorage.empty(dtype)
            fused_assign(storage, expression_of(data, "Vector"))
            self._storage = storage
            return

        self._storage = OwnedStorage.from_values(data, dtype)

    def __str__(self) -> str:
        return format_elements(self)

    def __repr__(self) -> str:
        return format_vector_repr(self)

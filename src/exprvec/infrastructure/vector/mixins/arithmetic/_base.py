"""
Arithmetic mixin defining the lazy Vector operators.

This module declares :class:`VectorMixinArithmetic`, which implements
``+ - * /`` (and their reflected and in-place forms) by building expression
nodes instead of computing results. The returned Vector is
expression-typed: it owns no memory and evaluates an element only when
something reads it, normally the fusing assignment of ``dst.assign(...)``.

Operand handling
----------------
- Vector or expression on both sides: `BinaryOpNode` (lengths must match).
- Scalar on the right: `ScalarRightNode`.
- Scalar on the left (reflected operators): `ScalarLeftNode`.
- Containers (lists, NumPy arrays, ...) raise `TypeError`.
"""

from __future__ import annotations

import operator
from abc import ABC
from typing import Any, Callable

from typing_extensions import Self

from ....expr._nodes import BinaryOpNode, ScalarLeftNode, ScalarRightNode
from ..._operands import expression_of


class VectorMixinArithmetic(ABC):
    """
    Element-wise arithmetic operators for vectors.

    Notes
    -----
    - No element is computed by these methods.
    - The in-place forms evaluate ``self <op> other`` straight into ``self``
      with a single fused loop; they do not allocate a temporary.
    """

    def _binary(
        self, other: Any, fn: Callable[[Any, Any], Any], symbol: str, reflected: bool
    ) -> Self:
        lhs = self.storage
        rhs = expression_of(other, symbol)
        if rhs is None:
            if reflected:
                node = ScalarLeftNode(other, lhs, fn, symbol)
            else:
                node = ScalarRightNode(lhs, other, fn, symbol)
        elif reflected:
            node = BinaryOpNode(rhs, lhs, fn, symbol)
        else:
            node = BinaryOpNode(lhs, rhs, fn, symbol)
        return type(self)._from_storage(node)

    # ----------------------------
    # Addition
    # ----------------------------
    def __add__(self, other: Any) -> Self:
        """
        Lazy element-wise addition.

        Parameters
        ----------
        other : Vector, IExpression or scalar
            Right-hand operand.

        Returns
        -------
        Vector
            Expression-typed Vector reading ``self[i] + other[i]``
            (or ``self[i] + other`` for a scalar).

        Raises
        ------
        SizeMismatchError
            If ``other`` is a vector of a different length.
        """
        return self._binary(other, operator.add, "+", False)

    def __radd__(self, other: Any) -> Self:
        return self._binary(other, operator.add, "+", True)

    def __iadd__(self, other: Any) -> Self:
        return self.assign(self.__add__(other))

    # ----------------------------
    # Subtraction
    # ----------------------------
    def __sub__(self, other: Any) -> Self:
        """Lazy element-wise subtraction, ``self[i] - other[i]``."""
        return self._binary(other, operator.sub, "-", False)

    def __rsub__(self, other: Any) -> Self:
        """
        Reflected subtraction, ``other - self[i]``.

        The scalar stays on the left, so the result is ``c - x`` and not
        ``x - c``.
        """
        return self._binary(other, operator.sub, "-", True)

    def __isub__(self, other: Any) -> Self:
        # fused write-back into the existing backing
        return self.assign(self.__sub__(other))

    # ----------------------------
    # Multiplication
    # ----------------------------
    def __mul__(self, other: Any) -> Self:
        """Lazy element-wise multiplication, ``self[i] * other[i]``."""
        return self._binary(other, operator.mul, "*", False)

    def __rmul__(self, other: Any) -> Self:
        """
        Reflected multiplication, ``other * self[i]``.

        The element's own ``__rmul__`` decides the result when ``other`` is a
        plain number and the elements are user objects.
        """
        return self._binary(other, operator.mul, "*", True)

    def __imul__(self, other: Any) -> Self:
        return self.assign(self.__mul__(other))

    # ----------------------------
    # True division
    # ----------------------------
    def __truediv__(self, other: Any) -> Self:
        """
        Lazy element-wise true division, ``self[i] / other[i]``.

        Notes
        -----
        Division by zero follows the element type: NumPy floats give inf/nan
        (with a NumPy warning), Python numbers raise `ZeroDivisionError` when
        the element is read.
        """
        return self._binary(other, operator.truediv, "/", False)

    def __rtruediv__(self, other: Any) -> Self:
        return self._binary(other, operator.truediv, "/", True)

    def __itruediv__(self, other: Any) -> Self:
        return self.assign(self.__truediv__(other))

"""
Element-wise functions over vectors and expressions.

Every function here is lazy when given a Vector or expression: it returns
an expression-typed Vector whose elements are computed on read. Scalars
are accepted too, so ``sin(0.5)`` is simply evaluated, and binary
functions accept a scalar on either side (``atan2(y, 1.0)``,
``maximum(0.0, x)``).

New functions are built with `unary_function` and `binary_function`:

>>> import math
>>> gamma = unary_function(math.gamma, "gamma")
>>> c = Vector()
>>> c.assign(gamma(Vector([1.0, 2.0, 3.0]))).to_list()
[1.0, 1.0, 2.0]
"""

from __future__ import annotations

import builtins
from typing import Any, Callable, Optional

import numpy as np

from ..expr._nodes import BinaryFnNode, ScalarLeftNode, ScalarRightNode, UnaryFnNode
from ._operands import expression_of
from ._vector import Vector


def unary_function(
    fn: Callable[[Any], Any], name: Optional[str] = None
) -> Callable[[Any], Any]:
    """
    Lift a one-argument element function to vectors.

    Parameters
    ----------
    fn : Callable[[Any], Any]
        Function applied to each element.
    name : Optional[str]
        Name used in expression reprs. Defaults to ``fn.__name__``.

    Returns
    -------
    Callable
        ``f(x)``: an expression-typed Vector for vector/expression input,
        ``fn(x)`` for a scalar.
    """
    label = name if name is not None else getattr(fn, "__name__", "fn")

    def apply(x: Any) -> Any:
        op = expression_of(x, label)
        if op is None:
            return fn(x)
        return Vector._from_storage(UnaryFnNode(op, fn, label))

    apply.__name__ = label
    apply.__qualname__ = label
    apply.__doc__ = f"Lazy element-wise ``{label}(x)``."
    return apply


def binary_function(
    fn: Callable[[Any, Any], Any], name: Optional[str] = None
) -> Callable[[Any, Any], Any]:
    """
    Lift a two-argument element function to vectors.

    Parameters
    ----------
    fn : Callable[[Any, Any], Any]
        Function applied to each pair of elements.
    name : Optional[str]
        Name used in expression reprs. Defaults to ``fn.__name__``.

    Returns
    -------
    Callable
        ``f(x, y)``. Two vectors build a `BinaryFnNode` (lengths must
        match); a vector and a scalar build a scalar node that keeps the
        scalar on its side; two scalars are evaluated directly.

    Raises
    ------
    SizeMismatchError
        From the returned function, if two vector operands differ in length.
    """
    label = name if name is not None else getattr(fn, "__name__", "fn")

    def apply(x: Any, y: Any) -> Any:
        op1 = expression_of(x, label)
        op2 = expression_of(y, label)
        if op1 is None and op2 is None:
            return fn(x, y)
        if op2 is None:
            node = ScalarRightNode(op1, y, fn, label)
        elif op1 is None:
            node = ScalarLeftNode(x, op2, fn, label)
        else:
            node = BinaryFnNode(op1, op2, fn, label)
        return Vector._from_storage(node)

    apply.__name__ = label
    apply.__qualname__ = label
    apply.__doc__ = f"Lazy element-wise ``{label}(x, y)``."
    return apply


sin = unary_function(np.sin, "sin")
cos = unary_function(np.cos, "cos")
tan = unary_function(np.tan, "tan")
sqrt = unary_function(np.sqrt, "sqrt")
abs = unary_function(builtins.abs, "abs")
exp = unary_function(np.exp, "exp")
log = unary_function(np.log, "log")
tanh = unary_function(np.tanh, "tanh")

atan2 = binary_function(np.arctan2, "atan2")
hypot = binary_function(np.hypot, "hypot")
maximum = binary_function(np.maximum, "maximum")
minimum = binary_function(np.minimum, "minimum")

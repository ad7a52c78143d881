"""
The `Vector` container and its free-function surface.

- ``Vector``: owned, borrowed, strided or expression-typed 1-D container
  with lazy operators and fused assignment.
- Element-wise functions: ``sin cos tan sqrt abs exp log tanh`` and
  ``atan2 hypot maximum minimum``, plus the ``unary_function`` /
  ``binary_function`` builders.
- Factories: ``zeros ones full linspace arange iota``.
"""

from ._factories import arange, full, iota, linspace, ones, zeros
from ._functions import (
    abs,
    atan2,
    binary_function,
    cos,
    exp,
    hypot,
    log,
    maximum,
    minimum,
    sin,
    sqrt,
    tan,
    tanh,
    unary_function,
)
from ._vector import Vector

__all__ = [
    "Vector",
    "abs",
    "arange",
    "atan2",
    "binary_function",
    "cos",
    "exp",
    "full",
    "hypot",
    "iota",
    "linspace",
    "log",
    "maximum",
    "minimum",
    "ones",
    "sin",
    "sqrt",
    "tan",
    "tanh",
    "unary_function",
    "zeros",
]

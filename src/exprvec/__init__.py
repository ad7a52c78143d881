"""
exprvec: lazy, fused element-wise expressions over 1-D vectors.

Arithmetic between vectors builds small expression objects instead of
temporary arrays; ``dst.assign(expr)`` (or ``dst[...] = expr``) evaluates
the whole expression in one pass, element by element, straight into the
destination. Strided views (``v[0, _, 2]``, ``v[_, _, -1]``, ``v[::2]``)
work both as operands and as assignment targets.

>>> from exprvec import Vector, _
>>> a = Vector([1.0, 2.0, 3.0, 4.0])
>>> b = Vector(4, 2.0)
>>> c = Vector()
>>> c.assign(a * b + 1.0).to_list()
[3.0, 5.0, 7.0, 9.0]
>>> c[_, _, 2] = 0.0
>>> str(c)
'[0.0, 5.0, 0.0, 9.0]'
"""

from .domain import (
    BadStrideError,
    EmptyReductionError,
    ReadOnlyStorageError,
    ResizeUnsupportedError,
    SizeMismatchError,
    StorageCapabilityError,
    StorageKind,
    _,
)
from .infrastructure.vector import (
    Vector,
    abs,
    arange,
    atan2,
    binary_function,
    cos,
    exp,
    full,
    hypot,
    iota,
    linspace,
    log,
    maximum,
    minimum,
    ones,
    sin,
    sqrt,
    tan,
    tanh,
    unary_function,
    zeros,
)

__version__ = "0.1.0"

__all__ = [
    "BadStrideError",
    "EmptyReductionError",
    "ReadOnlyStorageError",
    "ResizeUnsupportedError",
    "SizeMismatchError",
    "StorageCapabilityError",
    "StorageKind",
    "Vector",
    "_",
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

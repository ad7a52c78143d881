"""
Operand classification for the Vector operator surface.

Every operator and element-wise function sorts its arguments into one of
three groups:

- expressions: Vectors (unwrapped to their backing) and any object with
  callable ``size()`` and ``get(i)``; these become node operands;
- containers: lists, tuples, sets, dicts and NumPy arrays, which are
  refused so that they are never silently broadcast or copied;
- scalars: everything else, including NumPy scalars and user-defined
  element types; these become the fixed value of a scalar node.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ...domain._expression import IExpression
from ._core import VectorCoreMixin

_CONTAINERS = (list, tuple, set, frozenset, dict, np.ndarray)


def is_expression(value: Any) -> bool:
    return callable(getattr(value, "size", None)) and callable(
        getattr(value, "get", None)
    )


def expression_of(value: Any, op: str) -> Optional[IExpression]:
    """
    Return the expression behind ``value``, or None if it is a scalar.

    Parameters
    ----------
    value : Any
        Operand passed to an operator or function.
    op : str
        Operation name used in the error message.

    Raises
    ------
    TypeError
        If ``value`` is a container.
    """
    if isinstance(value, VectorCoreMixin):
        return value.storage
    if isinstance(value, _CONTAINERS):
        raise TypeError(
            f"unsupported operand for {op}: {type(value).__name__}; "
            "wrap it in a Vector first"
        )
    if is_expression(value):
        return value
    return None

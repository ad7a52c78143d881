"""
Lazy expression nodes.

When a user writes ``a + 0.5 * b``, no element is computed. Each operator
creates one of the nodes below, which holds references to its operands and
computes a single element when `get(i)` is called. The whole tree is
evaluated one index at a time by the fusing assignment, so no intermediate
vector is ever allocated.

Node family
-----------
- `NegNode`: ``-op[i]``
- `BinaryOpNode`: ``op1[i] <op> op2[i]`` for + - * /
- `ScalarLeftNode`: ``value <op> op2[i]``
- `ScalarRightNode`: ``op1[i] <op> value``
- `UnaryFnNode`: ``fn(op1[i])``
- `BinaryFnNode`: ``fn(op1[i], op2[i])``

Design notes
------------
- Nodes cache the bound ``get`` method of each operand at construction, so
  the per-element path through a tree of depth D is D direct calls.
- Operands are held by reference and must outlive the node.
- Nodes that combine two operands check that their lengths agree at
  construction and raise `SizeMismatchError` otherwise.
- ``dtype`` is derived lazily from the node's read expression (see
  `storage._dtype.result_dtype`) and cached.
"""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

import numpy as np

from ...domain._errors import SizeMismatchError
from ...domain._expression import IExpression
from ...domain._storage_kind import StorageKind
from ..storage._dtype import dtype_of, result_dtype, sample, scalar_sample


def _label(op: Any) -> str:
    if isinstance(op, ExprNode):
        return repr(op)
    kind = getattr(op, "kind", None)
    name = str(kind) if kind is not None else type(op).__name__
    return f"{name}[{op.size()}]"


def _check_sizes(symbol: str, op1: IExpression, op2: IExpression) -> None:
    n1, n2 = op1.size(), op2.size()
    if n1 != n2:
        raise SizeMismatchError(symbol, n1, n2)


class ExprNode(ABC):
    """
    Base for lazy expression nodes.

    Provides the attributes shared by every node (kind, non-resizable) and
    dtype caching. Subclasses implement `size`, `get` and `_probe_dtype`.
    """

    __slots__ = ("_dtype",)

    kind = StorageKind.EXPRESSION
    resizable = False

    def __init__(self) -> None:
        self._dtype: Optional[np.dtype] = None

    @property
    def dtype(self) -> np.dtype:
        if self._dtype is None:
            self._dtype = self._probe_dtype()
        return self._dtype

    @abstractmethod
    def _probe_dtype(self) -> np.dtype:
        raise NotImplementedError

    @abstractmethod
    def size(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def get(self, i: int) -> Any:
        raise NotImplementedError


class NegNode(ExprNode):
    """Element-wise negation: ``-op[i]``."""

    __slots__ = ("_op", "_get")

    def __init__(self, op: IExpression) -> None:
        super().__init__()
        self._op = op
        self._get = op.get

    def size(self) -> int:
        return self._op.size()

    def get(self, i: int) -> Any:
        return -self._get(i)

    def _probe_dtype(self) -> np.dtype:
        return result_dtype(operator.neg, sample(dtype_of(self._op)))

    def __repr__(self) -> str:
        return f"-{_label(self._op)}"


class BinaryOpNode(ExprNode):
    """
    Element-wise arithmetic between two expressions of equal length.

    Parameters
    ----------
    op1, op2 : IExpression
        Left and right operands.
    fn : Callable[[Any, Any], Any]
        Element operation (e.g., ``operator.add``).
    symbol : str
        Operator symbol used in diagnostics.

    Raises
    ------
    SizeMismatchError
        If ``op1.size() != op2.size()``.
    """

    __slots__ = ("_op1", "_op2", "_fn", "_symbol", "_get1", "_get2")

    def __init__(
        self, op1: IExpression, op2: IExpression, fn: Callable[[Any, Any], Any], symbol: str
    ) -> None:
        _check_sizes(symbol, op1, op2)
        super().__init__()
        self._op1 = op1
        self._op2 = op2
        self._fn = fn
        self._symbol = symbol
        self._get1 = op1.get
        self._get2 = op2.get

    def size(self) -> int:
        return self._op1.size()

    def get(self, i: int) -> Any:
        return self._fn(self._get1(i), self._get2(i))

    def _probe_dtype(self) -> np.dtype:
        return result_dtype(
            self._fn, sample(dtype_of(self._op1)), sample(dtype_of(self._op2))
        )

    def __repr__(self) -> str:
        return f"({_label(self._op1)} {self._symbol} {_label(self._op2)})"


class ScalarLeftNode(ExprNode):
    """
    Scalar on the left of an expression: ``value <op> op2[i]``.

    Kept separate from `ScalarRightNode` because non-commutative operations
    (``-``, ``/``, ``atan2``) depend on the side.
    """

    __slots__ = ("_value", "_op2", "_fn", "_symbol", "_get2")

    def __init__(
        self, value: Any, op2: IExpression, fn: Callable[[Any, Any], Any], symbol: str
    ) -> None:
        super().__init__()
        self._value = value
        self._op2 = op2
        self._fn = fn
        self._symbol = symbol
        self._get2 = op2.get

    @property
    def value(self) -> Any:
        return self._value

    def size(self) -> int:
        return self._op2.size()

    def get(self, i: int) -> Any:
        return self._fn(self._value, self._get2(i))

    def _probe_dtype(self) -> np.dtype:
        return result_dtype(
            self._fn, scalar_sample(self._value), sample(dtype_of(self._op2))
        )

    def __repr__(self) -> str:
        return f"({self._value!r} {self._symbol} {_label(self._op2)})"


class ScalarRightNode(ExprNode):
    """Scalar on the right of an expression: ``op1[i] <op> value``."""

    __slots__ = ("_op1", "_value", "_fn", "_symbol", "_get1")

    def __init__(
        self, op1: IExpression, value: Any, fn: Callable[[Any, Any], Any], symbol: str
    ) -> None:
        super().__init__()
        self._op1 = op1
        self._value = value
        self._fn = fn
        self._symbol = symbol
        self._get1 = op1.get

    @property
    def value(self) -> Any:
        return self._value

    def size(self) -> int:
        return self._op1.size()

    def get(self, i: int) -> Any:
        return self._fn(self._get1(i), self._value)

    def _probe_dtype(self) -> np.dtype:
        return result_dtype(
            self._fn, sample(dtype_of(self._op1)), scalar_sample(self._value)
        )

    def __repr__(self) -> str:
        return f"({_label(self._op1)} {self._symbol} {self._value!r})"


class UnaryFnNode(ExprNode):
    """Element-wise function application: ``fn(op1[i])``."""

    __slots__ = ("_op1", "_fn", "_name", "_get1")

    def __init__(self, op1: IExpression, fn: Callable[[Any], Any], name: str) -> None:
        super().__init__()
        self._op1 = op1
        self._fn = fn
        self._name = name
        self._get1 = op1.get

    def size(self) -> int:
        return self._op1.size()

    def get(self, i: int) -> Any:
        return self._fn(self._get1(i))

    def _probe_dtype(self) -> np.dtype:
        return result_dtype(self._fn, sample(dtype_of(self._op1)))

    def __repr__(self) -> str:
        return f"{self._name}({_label(self._op1)})"


class BinaryFnNode(ExprNode):
    """
    Element-wise two-argument function: ``fn(op1[i], op2[i])``.

    Raises
    ------
    SizeMismatchError
        If ``op1.size() != op2.size()``.
    """

    __slots__ = ("_op1", "_op2", "_fn", "_name", "_get1", "_get2")

    def __init__(
        self, op1: IExpression, op2: IExpression, fn: Callable[[Any, Any], Any], name: str
    ) -> None:
        _check_sizes(name, op1, op2)
        super().__init__()
        self._op1 = op1
        self._op2 = op2
        self._fn = fn
        self._name = name
        self._get1 = op1.get
        self._get2 = op2.get

    def size(self) -> int:
        return self._op1.size()

    def get(self, i: int) -> Any:
        return self._fn(self._get1(i), self._get2(i))

    def _probe_dtype(self) -> np.dtype:
        return result_dtype(
            self._fn, sample(dtype_of(self._op1)), sample(dtype_of(self._op2))
        )

    def __repr__(self) -> str:
        return f"{self._name}({_label(self._op1)}, {_label(self._op2)})"

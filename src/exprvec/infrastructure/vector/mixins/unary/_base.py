"""
Unary mixin defining lazy element-wise Vector transforms.

:class:`VectorMixinUnary` covers negation, ``abs`` and the common math
functions as methods (``v.sqrt()``, ``v.exp()`` ...). Like the arithmetic
operators they return expression-typed Vectors; nothing is computed until
the result is read or assigned.

The same transforms are available as free functions in
`exprvec.infrastructure.vector._functions`, which also accept scalars.
"""

from __future__ import annotations

import builtins
from abc import ABC
from typing import Any, Callable, Optional

import numpy as np
from typing_extensions import Self

from ....expr._nodes import NegNode, UnaryFnNode


class VectorMixinUnary(ABC):
    """
    Element-wise unary transforms for vectors.

    Notes
    -----
    Math methods use NumPy ufuncs, so they work on numeric elements and on
    object elements that implement the matching method (e.g., ``x.sqrt()``).
    ``abs`` uses the built-in so user element types can define ``__abs__``.
    """

    def _unary(self, fn: Callable[[Any], Any], name: str) -> Self:
        return type(self)._from_storage(UnaryFnNode(self.storage, fn, name))

    def __neg__(self) -> Self:
        """
        Lazy element-wise negation.

        Returns
        -------
        Vector
            Expression-typed Vector reading ``-self[i]``.
        """
        return type(self)._from_storage(NegNode(self.storage))

    def __abs__(self) -> Self:
        return self._unary(builtins.abs, "abs")

    def sqrt(self) -> Self:
        """Lazy element-wise square root."""
        return self._unary(np.sqrt, "sqrt")

    def exp(self) -> Self:
        return self._unary(np.exp, "exp")

    def log(self) -> Self:
        """Lazy element-wise natural logarithm."""
        return self._unary(np.log, "log")

    def sin(self) -> Self:
        return self._unary(np.sin, "sin")

    def cos(self) -> Self:
        return self._unary(np.cos, "cos")

    def apply(self, fn: Callable[[Any], Any], name: Optional[str] = None) -> Self:
        """
        Lazily apply an arbitrary element-wise function.

        Parameters
        ----------
        fn : Callable[[Any], Any]
            Function called once per element read.
        name : Optional[str]
            Label used in the expression's repr. Defaults to ``fn.__name__``.

        Returns
        -------
        Vector
            Expression-typed Vector reading ``fn(self[i])``.
        """
        if name is None:
            name = getattr(fn, "__name__", "fn")
        return self._unary(fn, name)

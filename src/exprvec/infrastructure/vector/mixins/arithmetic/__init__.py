"""
Arithmetic mixin for Vector operators.

Public API
----------
- ``VectorMixinArithmetic``: lazy ``+ - * /`` with reflected and in-place
  forms.
"""

from ._base import VectorMixinArithmetic

__all__ = [
    VectorMixinArithmetic.__name__,
]

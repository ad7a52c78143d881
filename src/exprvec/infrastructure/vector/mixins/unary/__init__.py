"""
Unary mixin for Vector transforms.

Public API
----------
- ``VectorMixinUnary``: ``-v``, ``abs(v)``, ``sqrt``, ``exp``, ``log``,
  ``sin``, ``cos`` and ``apply``.
"""

from ._base import VectorMixinUnary

__all__ = [
    VectorMixinUnary.__name__,
]

"""
Reduction mixin for vectors.

Public API
----------
- ``VectorMixinReduction``: ``sum`` and ``count``.
"""

from ._base import VectorMixinReduction

__all__ = [
    VectorMixinReduction.__name__,
]

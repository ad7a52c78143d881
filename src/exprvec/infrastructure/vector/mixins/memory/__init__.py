"""
Memory and assignment mixin for vectors.

Public API
----------
- ``VectorMixinMemory``: ``assign``, ``fill``, ``resize``, buffer adoption,
  raw access and materialisation.
"""

from ._base import VectorMixinMemory

__all__ = [
    VectorMixinMemory.__name__,
]

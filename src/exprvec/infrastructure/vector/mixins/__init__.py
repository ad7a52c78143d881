"""
Vector mixins grouped by concern.

Each subpackage exports a single mixin class; `Vector` combines them.
"""

from .arithmetic import VectorMixinArithmetic
from .memory import VectorMixinMemory
from .reduction import VectorMixinReduction
from .unary import VectorMixinUnary

__all__ = [
    VectorMixinArithmetic.__name__,
    VectorMixinMemory.__name__,
    VectorMixinReduction.__name__,
    VectorMixinUnary.__name__,
]

"""
Lazy expression nodes and their evaluation.

Nodes are built by the Vector operator surface and evaluated only by
``fused_assign`` (or by any other indexed read).
"""

from ._evaluate import fused_assign
from ._nodes import (
    BinaryFnNode,
    BinaryOpNode,
    ExprNode,
    NegNode,
    ScalarLeftNode,
    ScalarRightNode,
    UnaryFnNode,
)

__all__ = [
    BinaryFnNode.__name__,
    BinaryOpNode.__name__,
    ExprNode.__name__,
    NegNode.__name__,
    ScalarLeftNode.__name__,
    ScalarRightNode.__name__,
    UnaryFnNode.__name__,
    fused_assign.__name__,
]

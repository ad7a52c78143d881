"""
Printable forms of a Vector.

``str(v)`` lists the elements in brackets, separated by ``", "``, with
string elements double-quoted: ``[1.0, 2.0]``, ``["a", "b"]``, ``[]``.
``repr(v)`` wraps the same listing with the backing kind and dtype.
Expression-typed Vectors are evaluated element by element to print them.
"""

from __future__ import annotations

from typing import Any, Iterable


def format_element(value: Any) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def format_elements(values: Iterable[Any]) -> str:
    """Return ``[v0, v1, ...]`` for the given elements."""
    return "[" + ", ".join(format_element(v) for v in values) + "]"


def format_vector_repr(vector: Any) -> str:
    return (
        f"Vector({format_elements(vector)}, "
        f"kind={vector.kind}, dtype={vector.dtype})"
    )

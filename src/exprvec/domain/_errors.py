"""
Storage- and expression-related exceptions for exprvec.

This module defines the custom errors used to signal programmer mistakes
when building or evaluating vector expressions: reductions over empty
vectors, length mismatches between operands or between an assignment's
source and destination, zero slice strides, and operations requested on a
storage kind that does not provide them (e.g., resizing a borrowed buffer).

All errors are raised at the call site and are never retried or degraded
by the library. They carry the offending values as attributes so callers
and tests can inspect them.
"""


class StorageCapabilityError(RuntimeError):
    """
    Raised when an operation is requested on a storage kind that does not
    provide it.

    Examples include writing into an expression-typed Vector, or asking a
    strided view for its raw data pointer.

    Attributes
    ----------
    op : str
        The name of the operation that was attempted (e.g., "write", "resize").
    kind : str
        String representation of the storage kind on which the operation
        was attempted.
    """

    def __init__(self, op: str, kind: str) -> None:
        """
        Initialize the StorageCapabilityError.

        Parameters
        ----------
        op : str
            The operation name that is not supported by the storage kind.
        kind : str
            The storage kind identifier (e.g., "strided", "expression").
        """
        super().__init__(f"{op} is not supported by '{kind}' storage.")
        self.op = op
        self.kind = kind


class ResizeUnsupportedError(StorageCapabilityError):
    """
    Raised when a non-owning storage (borrowed buffer or strided view) is
    asked to change its length.
    """

    def __init__(self, kind: str) -> None:
        super().__init__("resize", kind)


class ReadOnlyStorageError(StorageCapabilityError):
    """
    Raised when a write is attempted through a read-only borrowed buffer,
    or when a read-only buffer is handed to the mutable borrow path.
    """

    def __init__(self, kind: str, op: str = "write") -> None:
        super().__init__(op, kind)


class SizeMismatchError(ValueError):
    """
    Raised when two lengths that must agree do not.

    This covers both binary expression nodes built over operands of
    different lengths and assignments into a non-resizable destination
    whose length differs from the right-hand side.

    Attributes
    ----------
    op : str
        The operation that detected the mismatch (e.g., "+", "assign").
    expected : int
        Length required by the left operand or destination.
    actual : int
        Length supplied by the right operand or source expression.
    """

    def __init__(self, op: str, expected: int, actual: int) -> None:
        """
        Initialize the SizeMismatchError.

        Parameters
        ----------
        op : str
            Operation that detected the mismatch.
        expected : int
            Length of the left operand / destination.
        actual : int
            Length of the right operand / source.
        """
        super().__init__(f"Size mismatch in '{op}': {expected} vs {actual}.")
        self.op = op
        self.expected = expected
        self.actual = actual


class EmptyReductionError(ValueError):
    """
    Raised when a reduction without an identity element (e.g., ``sum``,
    which folds from element 0) is applied to a zero-length vector.
    """

    def __init__(self, op: str) -> None:
        super().__init__(f"{op}() called on a zero-length vector.")
        self.op = op


class BadStrideError(ValueError):
    """Raised when a slice is requested with a zero step."""

    def __init__(self, step: int = 0) -> None:
        super().__init__(f"slice step cannot be {step}.")
        self.step = step

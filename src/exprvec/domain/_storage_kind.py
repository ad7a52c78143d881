"""
Storage kind enumeration.

A Vector is a thin facade over one of several backings. `StorageKind`
names the category of a backing independent of its concrete class, the
same way a device type names a device category independent of its index.
"""

from enum import Enum


class StorageKind(Enum):
    """
    Enumeration of Vector backings.

    Attributes
    ----------
    OWNED : StorageKind
        Contiguous NumPy buffer owned by the Vector; resizable.
    BORROWED : StorageKind
        Caller-supplied writable buffer; writes go through, never resized.
    BORROWED_READONLY : StorageKind
        Caller-supplied buffer adopted for reading only.
    STRIDED : StorageKind
        View over another storage defined by start, end and step.
    EXPRESSION : StorageKind
        Lazy expression node computing elements on indexed access.
    """

    OWNED = "owned"
    BORROWED = "borrowed"
    BORROWED_READONLY = "borrowed-readonly"
    STRIDED = "strided"
    EXPRESSION = "expression"

    def __str__(self) -> str:
        return self.value

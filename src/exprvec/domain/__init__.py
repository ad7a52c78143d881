"""
Domain layer of exprvec: storage contracts, storage kinds, slice algebra
and the error taxonomy. Nothing here depends on a concrete backing.
"""

from ._errors import (
    BadStrideError,
    EmptyReductionError,
    ReadOnlyStorageError,
    ResizeUnsupportedError,
    SizeMismatchError,
    StorageCapabilityError,
)
from ._expression import IExpression, IStorage, Number
from ._slice import DefaultIndex, ResolvedSlice, SliceSpec, _, is_slice_key
from ._storage_kind import StorageKind

__all__ = [
    "BadStrideError",
    "DefaultIndex",
    "EmptyReductionError",
    "IExpression",
    "IStorage",
    "Number",
    "ReadOnlyStorageError",
    "ResizeUnsupportedError",
    "ResolvedSlice",
    "SizeMismatchError",
    "SliceSpec",
    "StorageCapabilityError",
    "StorageKind",
    "_",
    "is_slice_key",
]

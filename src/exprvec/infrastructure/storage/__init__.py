"""
Concrete Vector backings.

- ``OwnedStorage``: resizable NumPy buffer owned by the Vector.
- ``BorrowedStorage``: writable caller memory, adopted without copying.
- ``ReadOnlyBorrowedStorage``: caller memory adopted for reading only.
- ``StridedStorage``: start/end/step view over another backing.

All of them satisfy :class:`exprvec.domain.IStorage` structurally; none
inherits from a shared base.
"""

from ._borrowed import BorrowedStorage, ReadOnlyBorrowedStorage, borrow_array
from ._owned import OwnedStorage
from ._strided import StridedStorage

__all__ = [
    BorrowedStorage.__name__,
    OwnedStorage.__name__,
    ReadOnlyBorrowedStorage.__name__,
    StridedStorage.__name__,
    borrow_array.__name__,
]

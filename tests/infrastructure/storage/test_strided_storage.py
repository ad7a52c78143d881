import unittest
from unittest import TestCase

import numpy as np

from exprvec.domain import (
    BadStrideError,
    ResizeUnsupportedError,
    SliceSpec,
    StorageCapabilityError,
    StorageKind,
    _,
)
from exprvec.infrastructure.expr import NegNode
from exprvec.infrastructure.storage import OwnedStorage, StridedStorage


def _ints(n: int) -> OwnedStorage:
    return OwnedStorage.from_values(list(range(n)))


class TestStridedStorage(TestCase):
    def test_forward_view(self):
        parent = _ints(10)
        view = StridedStorage(parent, 0, 10, 2)
        self.assertIs(view.kind, StorageKind.STRIDED)
        self.assertEqual(view.size(), 5)
        self.assertEqual([view.get(i) for i in range(5)], [0, 2, 4, 6, 8])

    def test_reverse_view(self):
        parent = _ints(10)
        view = StridedStorage(parent, 9, -1, -1)
        self.assertEqual(view.size(), 10)
        self.assertEqual([view.get(i) for i in range(10)], list(range(9, -1, -1)))

    def test_writes_forward_to_parent(self):
        parent = _ints(10)
        view = StridedStorage(parent, 1, 10, 3)
        view.set(1, 100)
        self.assertEqual(parent.get(4), 100)

        view.fill(-1)
        self.assertEqual([parent.get(i) for i in range(10)], [0, -1, 2, 3, -1, 5, 6, -1, 8, 9])

    def test_zero_step_raises(self):
        with self.assertRaises(BadStrideError):
            StridedStorage(_ints(3), 0, 3, 0)

    def test_from_slice(self):
        parent = _ints(6)
        view = StridedStorage.from_slice(parent, SliceSpec(_, _, -2).resolve(6))
        self.assertEqual((view.start, view.end, view.step), (5, -1, -2))
        self.assertEqual([view.get(i) for i in range(view.size())], [5, 3, 1])
        self.assertIs(view.parent, parent)

    def test_dtype_follows_parent(self):
        self.assertEqual(StridedStorage(OwnedStorage.sized(4), 0, 4, 1).dtype, np.float64)

    def test_cannot_resize(self):
        with self.assertRaises(ResizeUnsupportedError):
            StridedStorage(_ints(3), 0, 3, 1).resize(1)

    def test_view_over_expression_is_read_only(self):
        parent = _ints(4)
        view = StridedStorage(NegNode(parent), 3, -1, -1)
        self.assertEqual([view.get(i) for i in range(4)], [-3, -2, -1, 0])
        with self.assertRaises(StorageCapabilityError):
            view.set(0, 1)

    def test_view_sees_parent_after_resize(self):
        parent = OwnedStorage.from_values([1.0, 2.0])
        view = StridedStorage(parent, 0, 2, 1)
        parent.resize(4)
        parent.set(0, 9.0)
        self.assertEqual(view.get(0), 9.0)


if __name__ == "__main__":
    unittest.main()

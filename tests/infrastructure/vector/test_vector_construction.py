import unittest
from unittest import TestCase

import numpy as np

from exprvec import (
    ReadOnlyStorageError,
    ResizeUnsupportedError,
    StorageCapabilityError,
    StorageKind,
    Vector,
)


class Squares:
    """User-defined expression: element i is i*i."""

    def __init__(self, n):
        self.n = n

    def size(self):
        return self.n

    def get(self, i):
        return i * i


class TestVectorConstructors(TestCase):
    def test_default_is_empty_owned(self):
        v = Vector()
        self.assertEqual(v.size(), 0)
        self.assertEqual(len(v), 0)
        self.assertIs(v.kind, StorageKind.OWNED)
        self.assertTrue(v.resizable)

    def test_sized_is_zero_filled_float(self):
        v = Vector(3)
        self.assertEqual(v.to_list(), [0.0, 0.0, 0.0])
        self.assertEqual(v.dtype, np.float64)

    def test_sized_with_fill(self):
        self.assertEqual(Vector(3, 7).to_list(), [7, 7, 7])
        self.assertEqual(Vector(2, "x").to_list(), ["x", "x"])
        self.assertEqual(Vector(2, "x").dtype, object)

    def test_explicit_dtype(self):
        self.assertEqual(Vector(3, dtype=np.int32).dtype, np.int32)
        self.assertEqual(Vector([1, 2], dtype=np.float64).to_list(), [1.0, 2.0])

    def test_from_sequences(self):
        self.assertEqual(Vector([1, 2, 3]).to_list(), [1, 2, 3])
        self.assertEqual(Vector(range(4)).to_list(), [0, 1, 2, 3])
        self.assertEqual(Vector(["a", "b"]).dtype, object)

    def test_from_ndarray_copies(self):
        arr = np.arange(3.0)
        v = Vector(arr)
        arr[0] = 100.0
        self.assertEqual(v[0], 0.0)

    def test_from_vector_copies(self):
        a = Vector([1.0, 2.0])
        b = Vector(a)
        a[0] = 5.0
        self.assertEqual(b.to_list(), [1.0, 2.0])
        self.assertIsNot(b.storage, a.storage)

    def test_from_expression_evaluates(self):
        a = Vector([1.0, 2.0])
        v = Vector(a * 3.0)
        self.assertIs(v.kind, StorageKind.OWNED)
        self.assertEqual(v.to_list(), [3.0, 6.0])

    def test_invalid_arguments(self):
        with self.assertRaises(TypeError):
            Vector(None, 3)
        with self.assertRaises(TypeError):
            Vector([1], 2)
        with self.assertRaises(TypeError):
            Vector("abc")
        with self.assertRaises(ValueError):
            Vector(-1)


class TestVectorBorrowing(TestCase):
    def test_from_buffer_shares_memory(self):
        arr = np.zeros(4)
        v = Vector.from_buffer(arr)
        self.assertIs(v.kind, StorageKind.BORROWED)
        self.assertIs(v.buffer, arr)
        self.assertEqual(v.data_ptr(), arr.ctypes.data)

        v[0] = 5.0
        self.assertEqual(arr[0], 5.0)
        arr[1] = 6.0
        self.assertEqual(v[1], 6.0)

    def test_from_buffer_prefix(self):
        v = Vector.from_buffer(np.arange(10.0), 3)
        self.assertEqual(v.to_list(), [0.0, 1.0, 2.0])

    def test_borrowed_cannot_resize(self):
        v = Vector.from_buffer(np.zeros(2))
        with self.assertRaises(ResizeUnsupportedError):
            v.resize(3)

    def test_read_only_buffer(self):
        arr = np.arange(3.0)
        arr.flags.writeable = False
        v = Vector.from_buffer(arr)
        self.assertIs(v.kind, StorageKind.BORROWED_READONLY)
        self.assertEqual(v.to_list(), [0.0, 1.0, 2.0])
        with self.assertRaises(ReadOnlyStorageError):
            v[0] = 1.0
        with self.assertRaises(ReadOnlyStorageError):
            v.assign(Vector(3))
        with self.assertRaises(ReadOnlyStorageError):
            v.fill(0.0)

    def test_set_buffer_switches_storage(self):
        v = Vector(3)
        arr = np.ones(2)
        self.assertIs(v.set_buffer(arr), v)
        self.assertIs(v.kind, StorageKind.BORROWED)
        self.assertEqual(v.size(), 2)

        v.assign(Vector([3.0, 4.0]))
        self.assertEqual(arr.tolist(), [3.0, 4.0])


class TestVectorFromExpression(TestCase):
    def test_wraps_user_expression(self):
        v = Vector.from_expression(Squares(4))
        self.assertIs(v.kind, StorageKind.EXPRESSION)
        self.assertEqual(v.dtype, object)
        self.assertEqual(v.to_list(), [0, 1, 4, 9])

        c = Vector()
        c.assign(v + 1)
        self.assertEqual(c.to_list(), [1, 2, 5, 10])

    def test_expression_is_not_writable(self):
        v = Vector.from_expression(Squares(2))
        with self.assertRaises(StorageCapabilityError):
            v[0] = 1
        with self.assertRaises(StorageCapabilityError):
            v.assign(Vector(2))
        with self.assertRaises(ResizeUnsupportedError):
            v.resize(3)
        with self.assertRaises(StorageCapabilityError):
            v.data_ptr()

    def test_rejects_non_expressions(self):
        with self.assertRaises(TypeError):
            Vector.from_expression(5)


class TestVectorCopyAndResize(TestCase):
    def test_copy_of_view_is_owned(self):
        v = Vector([1, 2, 3, 4])
        c = v[::2].copy()
        self.assertIs(c.kind, StorageKind.OWNED)
        self.assertEqual(c.to_list(), [1, 3])
        c[0] = 100
        self.assertEqual(v[0], 1)

    def test_resize_keeps_prefix(self):
        v = Vector([1.0, 2.0])
        self.assertIs(v.resize(4), v)
        self.assertEqual(v.to_list(), [1.0, 2.0, 0.0, 0.0])


if __name__ == "__main__":
    unittest.main()

import array
import unittest
from unittest import TestCase

import numpy as np

from exprvec.domain import (
    ReadOnlyStorageError,
    ResizeUnsupportedError,
    StorageKind,
)
from exprvec.infrastructure.storage import (
    BorrowedStorage,
    ReadOnlyBorrowedStorage,
    borrow_array,
)


class TestBorrowArray(TestCase):
    def test_ndarray_is_shared(self):
        arr = np.arange(5.0)
        self.assertIs(borrow_array(arr), arr)
        self.assertTrue(np.shares_memory(borrow_array(arr, 3), arr))
        self.assertEqual(borrow_array(arr, 3).shape, (3,))

    def test_buffer_protocol_objects(self):
        buf = array.array("d", [1.0, 2.0, 3.0])
        arr = borrow_array(buf)
        self.assertEqual(arr.dtype, np.float64)
        arr[0] = 9.0
        self.assertEqual(buf[0], 9.0)

    def test_rejects_lists(self):
        with self.assertRaises(TypeError):
            borrow_array([1.0, 2.0])

    def test_rejects_bad_shapes_and_lengths(self):
        with self.assertRaises(ValueError):
            borrow_array(np.zeros((2, 2)))
        with self.assertRaises(ValueError):
            borrow_array(np.zeros(3), 4)
        with self.assertRaises(ValueError):
            borrow_array(np.zeros(3), -1)


class TestBorrowedStorage(TestCase):
    def test_writes_go_through(self):
        arr = np.zeros(4)
        s = BorrowedStorage(arr)
        s.set(2, 5.0)
        self.assertEqual(arr[2], 5.0)
        s.fill(1.5)
        np.testing.assert_array_equal(arr, [1.5, 1.5, 1.5, 1.5])

    def test_reads_see_provider_writes(self):
        arr = np.zeros(3)
        s = BorrowedStorage(arr)
        arr[1] = 7.0
        self.assertEqual(s.get(1), 7.0)

    def test_truncated_borrow(self):
        arr = np.arange(10.0)
        s = BorrowedStorage(arr, 4)
        self.assertEqual(s.size(), 4)
        self.assertEqual(s.data_ptr(), arr.ctypes.data)

    def test_array_module_buffer(self):
        buf = array.array("i", [1, 2, 3])
        s = BorrowedStorage(buf)
        s.set(1, 20)
        self.assertEqual(buf[1], 20)

    def test_cannot_resize(self):
        s = BorrowedStorage(np.zeros(3))
        self.assertIs(s.kind, StorageKind.BORROWED)
        self.assertFalse(s.resizable)
        with self.assertRaises(ResizeUnsupportedError):
            s.resize(5)

    def test_read_only_memory_is_refused(self):
        with self.assertRaises(ReadOnlyStorageError) as ctx:
            BorrowedStorage(b"abc")
        self.assertEqual(ctx.exception.op, "mutable borrow")


class TestReadOnlyBorrowedStorage(TestCase):
    def test_reads(self):
        s = ReadOnlyBorrowedStorage(b"abc")
        self.assertIs(s.kind, StorageKind.BORROWED_READONLY)
        self.assertEqual(s.size(), 3)
        self.assertEqual(s.get(0), ord("a"))

    def test_writes_raise(self):
        s = ReadOnlyBorrowedStorage(np.zeros(3))
        with self.assertRaises(ReadOnlyStorageError):
            s.set(0, 1.0)
        with self.assertRaises(ReadOnlyStorageError):
            s.fill(1.0)
        with self.assertRaises(ResizeUnsupportedError):
            s.resize(1)

    def test_buffer_view_is_not_writeable_but_provider_is(self):
        arr = np.zeros(3)
        s = ReadOnlyBorrowedStorage(arr)
        self.assertFalse(s.buffer.flags.writeable)
        self.assertTrue(arr.flags.writeable)

        arr[0] = 5.0
        self.assertEqual(s.get(0), 5.0)


if __name__ == "__main__":
    unittest.main()

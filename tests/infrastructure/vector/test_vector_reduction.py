import unittest
from functools import reduce
from unittest import TestCase

import numpy as np

from exprvec import EmptyReductionError, Vector, _


class TestVectorSum(TestCase):
    def test_sum_is_left_fold(self):
        values = [0.1, 0.2, 0.3, 0.4]
        self.assertEqual(Vector(values).sum(), reduce(lambda x, y: x + y, values))

    def test_sum_without_identity_element(self):
        self.assertEqual(Vector(["a", "b", "c"]).sum(), "abc")

    def test_sum_of_expression_and_view(self):
        a = Vector([1.0, 2.0, 3.0, 4.0])
        self.assertEqual((a * 2.0).sum(), 20.0)
        self.assertEqual(a[_, _, 2].sum(), 4.0)

    def test_empty_raises(self):
        with self.assertRaises(EmptyReductionError):
            Vector().sum()
        with self.assertRaises(EmptyReductionError):
            Vector([1.0, 2.0])[0, 0].sum()


class TestVectorCount(TestCase):
    def test_count(self):
        self.assertEqual(Vector([1, 2, 1, 1]).count(1), 3)
        self.assertEqual(Vector(["x", "y", "x"]).count("x"), 2)
        self.assertEqual(Vector([1.0, 2.0]).count(3.0), 0)
        self.assertEqual(Vector().count(0), 0)

    def test_count_over_expression(self):
        a = Vector(np.arange(6.0))
        self.assertEqual((a - a).count(0.0), 6)


if __name__ == "__main__":
    unittest.main()

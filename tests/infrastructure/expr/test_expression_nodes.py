import operator
import unittest
from unittest import TestCase

import numpy as np

from exprvec.domain import SizeMismatchError, StorageKind
from exprvec.infrastructure.expr import (
    BinaryFnNode,
    BinaryOpNode,
    ExprNode,
    NegNode,
    ScalarLeftNode,
    ScalarRightNode,
    UnaryFnNode,
)
from exprvec.infrastructure.storage import OwnedStorage


class CountingSource:
    """Expression source that records every index read."""

    def __init__(self, values):
        self.values = list(values)
        self.reads = []

    def size(self):
        return len(self.values)

    def get(self, i):
        self.reads.append(i)
        return self.values[i]


class TestNodeEvaluation(TestCase):
    def setUp(self) -> None:
        self.a = OwnedStorage.from_values([1.0, 2.0, 3.0])
        self.b = OwnedStorage.from_values([4.0, 5.0, 6.0])

    def test_binary_ops(self):
        cases = [
            (operator.add, "+", [5.0, 7.0, 9.0]),
            (operator.sub, "-", [-3.0, -3.0, -3.0]),
            (operator.mul, "*", [4.0, 10.0, 18.0]),
            (operator.truediv, "/", [0.25, 0.4, 0.5]),
        ]
        for fn, symbol, expected in cases:
            with self.subTest(symbol=symbol):
                node = BinaryOpNode(self.a, self.b, fn, symbol)
                self.assertEqual(node.size(), 3)
                np.testing.assert_allclose([node.get(i) for i in range(3)], expected)

    def test_scalar_sides_are_not_commuted(self):
        left = ScalarLeftNode(10.0, self.a, operator.sub, "-")
        right = ScalarRightNode(self.a, 10.0, operator.sub, "-")
        self.assertEqual([left.get(i) for i in range(3)], [9.0, 8.0, 7.0])
        self.assertEqual([right.get(i) for i in range(3)], [-9.0, -8.0, -7.0])
        self.assertEqual(left.value, 10.0)

    def test_negation_and_functions(self):
        self.assertEqual(NegNode(self.a).get(2), -3.0)
        self.assertAlmostEqual(UnaryFnNode(self.b, np.sqrt, "sqrt").get(0), 2.0)
        node = BinaryFnNode(self.a, self.b, np.maximum, "maximum")
        self.assertEqual([node.get(i) for i in range(3)], [4.0, 5.0, 6.0])

    def test_nested_tree(self):
        # a + 0.5*a + 0.5*b
        node = BinaryOpNode(
            BinaryOpNode(
                self.a, ScalarLeftNode(0.5, self.a, operator.mul, "*"), operator.add, "+"
            ),
            ScalarLeftNode(0.5, self.b, operator.mul, "*"),
            operator.add,
            "+",
        )
        np.testing.assert_allclose([node.get(i) for i in range(3)], [3.5, 5.5, 7.5])

    def test_nodes_are_not_writable(self):
        node = NegNode(self.a)
        self.assertIs(node.kind, StorageKind.EXPRESSION)
        self.assertFalse(node.resizable)
        self.assertFalse(hasattr(node, "set"))


class TestNodeSizeChecks(TestCase):
    def test_binary_mismatch_raises_at_construction(self):
        a = OwnedStorage.sized(3)
        b = OwnedStorage.sized(2)
        with self.assertRaises(SizeMismatchError) as ctx:
            BinaryOpNode(a, b, operator.add, "+")
        self.assertEqual((ctx.exception.expected, ctx.exception.actual), (3, 2))

        with self.assertRaises(SizeMismatchError):
            BinaryFnNode(a, b, np.hypot, "hypot")


class TestNodeLaziness(TestCase):
    def test_construction_reads_nothing(self):
        src = CountingSource([1.0, 2.0, 3.0])
        node = ScalarRightNode(NegNode(src), 2.0, operator.mul, "*")
        _ = node.dtype
        self.assertEqual(src.reads, [])

        self.assertEqual(node.get(1), -4.0)
        self.assertEqual(src.reads, [1])

    def test_operands_are_referenced_not_copied(self):
        a = OwnedStorage.from_values([1.0, 2.0])
        node = NegNode(a)
        a.set(0, 10.0)
        self.assertEqual(node.get(0), -10.0)


class TestNodeDtype(TestCase):
    def test_numeric_promotion(self):
        i = OwnedStorage.from_values(np.array([1, 2], dtype=np.int64))
        f = OwnedStorage.from_values([1.0, 2.0])
        self.assertEqual(BinaryOpNode(i, i, operator.add, "+").dtype, np.int64)
        self.assertEqual(BinaryOpNode(i, i, operator.truediv, "/").dtype, np.float64)
        self.assertEqual(BinaryOpNode(i, f, operator.mul, "*").dtype, np.float64)
        self.assertEqual(ScalarRightNode(i, 0.5, operator.mul, "*").dtype, np.float64)
        self.assertEqual(UnaryFnNode(i, np.sqrt, "sqrt").dtype, np.float64)

    def test_object_operands_give_object(self):
        s = OwnedStorage.from_values(["a", "b"])
        self.assertEqual(ScalarRightNode(s, "!", operator.add, "+").dtype, object)
        self.assertEqual(NegNode(CountingSource([1])).dtype, object)

    def test_non_numeric_scalar_gives_object(self):
        f = OwnedStorage.from_values([1.0, 2.0])
        self.assertEqual(ScalarLeftNode("x", f, operator.mul, "*").dtype, object)

    def test_user_functions_are_not_called_for_dtype(self):
        calls = []

        def record(*args):
            calls.append(args)
            return 0

        f = OwnedStorage.from_values([1.0, 2.0])
        self.assertEqual(UnaryFnNode(f, record, "record").dtype, object)
        self.assertEqual(BinaryFnNode(f, f, record, "record").dtype, object)
        self.assertEqual(ScalarRightNode(f, 2.0, record, "record").dtype, object)
        self.assertEqual(ScalarLeftNode(2.0, f, record, "record").dtype, object)
        self.assertEqual(calls, [])

    def test_builtin_kernels_are_typed(self):
        i = OwnedStorage.from_values(np.array([-1, 2], dtype=np.int64))
        self.assertEqual(UnaryFnNode(i, abs, "abs").dtype, np.int64)
        self.assertEqual(BinaryFnNode(i, i, np.maximum, "maximum").dtype, np.int64)


class TestExprNodeBase(TestCase):
    def test_base_is_abstract(self):
        with self.assertRaises(TypeError):
            ExprNode()

    def test_subclass_must_implement_reads(self):
        class SizeOnly(ExprNode):
            def size(self):
                return 0

        with self.assertRaises(TypeError):
            SizeOnly()


class TestNodeRepr(TestCase):
    def test_repr_shows_tree(self):
        a = OwnedStorage.sized(3)
        b = OwnedStorage.sized(3)
        node = BinaryOpNode(a, ScalarLeftNode(0.5, b, operator.mul, "*"), operator.add, "+")
        self.assertEqual(repr(node), "(owned[3] + (0.5 * owned[3]))")
        self.assertEqual(repr(NegNode(a)), "-owned[3]")
        self.assertEqual(repr(UnaryFnNode(a, np.sin, "sin")), "sin(owned[3])")
        self.assertEqual(
            repr(BinaryFnNode(a, b, np.hypot, "hypot")), "hypot(owned[3], owned[3])"
        )


if __name__ == "__main__":
    unittest.main()

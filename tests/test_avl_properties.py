"""Property tests: invariants that must hold after any sequence of inserts."""

import math
import unittest

from hypothesis import given, strategies as st

from avltree.avl_tree import AVLTree, balance_factor, node_height

keys = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=200)


def _nodes(tree):
    stack = [tree.root] if tree.root is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child is not None)


class TestAVLTreeProperties(unittest.TestCase):
    @given(keys)
    def test_inorder_is_strictly_ascending(self, xs):
        tree = AVLTree.from_iterable(xs)
        self.assertEqual(list(tree.inorder()), sorted(set(xs)))

    @given(keys)
    def test_every_node_is_balanced(self, xs):
        tree = AVLTree.from_iterable(xs)
        for node in _nodes(tree):
            self.assertLessEqual(abs(balance_factor(node)), 1)

    @given(keys)
    def test_cached_heights_match_shape(self, xs):
        tree = AVLTree.from_iterable(xs)
        for node in _nodes(tree):
            self.assertEqual(
                node.height,
                1 + max(node_height(node.left), node_height(node.right)),
            )

    @given(keys)
    def test_height_is_logarithmic(self, xs):
        tree = AVLTree.from_iterable(xs)
        n = len(tree)
        self.assertEqual(n, len(set(xs)))
        self.assertLessEqual(tree.height(), 1.44 * math.log2(n + 2))

    @given(keys, st.data())
    def test_duplicate_insert_keeps_structure(self, xs, data):
        tree = AVLTree.from_iterable(xs)
        before = list(tree.level_order())
        if xs:
            tree.insert(data.draw(st.sampled_from(xs)))
        self.assertEqual(list(tree.level_order()), before)
        self.assertEqual(len(tree), len(set(xs)))

    @given(keys)
    def test_level_order_visits_every_value_once(self, xs):
        tree = AVLTree.from_iterable(xs)
        values = [value for value, _ in tree.level_order()]
        self.assertEqual(sorted(values), sorted(set(xs)))
        if values:
            self.assertEqual(values[0], tree.root.value)


if __name__ == "__main__":
    unittest.main()

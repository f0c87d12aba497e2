import unittest

from ordered_tree import AVLTree, BinarySearchTree, InvalidKeyError, OrderedSet
from ordered_tree.base import compare


class TestBinarySearchTree(unittest.TestCase):

    def setUp(self):
        self.bst: BinarySearchTree[int] = BinarySearchTree(validate=True)

    def fill(self, values):
        for v in values:
            self.bst.add(v)

    def test_new_tree_is_empty(self):
        self.assertEqual(self.bst.size(), 0)
        self.assertTrue(self.bst.is_empty())
        self.assertEqual(self.bst.height(), -1)

    def test_min_on_empty_raises(self):
        with self.assertRaises(ValueError):
            self.bst.min()

    def test_max_on_empty_raises(self):
        with self.assertRaises(ValueError):
            self.bst.max()

    def test_add_single_element(self):
        self.assertTrue(self.bst.add(42))
        self.assertEqual(self.bst.size(), 1)
        self.assertFalse(self.bst.is_empty())
        self.assertTrue(self.bst.contains(42))

    def test_add_duplicate_returns_false(self):
        self.bst.add(42)
        self.assertFalse(self.bst.add(42))
        self.assertEqual(self.bst.size(), 1)

    def test_add_none_raises(self):
        with self.assertRaises(InvalidKeyError):
            self.bst.add(None)

    def test_nan_is_rejected(self):
        self.fill([1.0, 2.0])
        with self.assertRaises(InvalidKeyError):
            self.bst.add(float('nan'))
        with self.assertRaises(InvalidKeyError):
            self.bst.remove(float('nan'))
        with self.assertRaises(InvalidKeyError):
            self.bst.contains(float('nan'))
        self.assertEqual(list(self.bst.in_order()), [1.0, 2.0])

    def test_nan_is_rejected_on_empty_tree(self):
        with self.assertRaises(InvalidKeyError):
            self.bst.add(float('nan'))
        self.assertTrue(self.bst.is_empty())
        self.assertTrue(self.bst.add(1.0))

    def test_add_keeps_insertion_shape(self):
        self.fill([50, 30, 70, 20, 40, 60, 80])
        self.assertEqual(list(self.bst.pre_order()), [50, 30, 20, 40, 70, 60, 80])
        self.assertEqual(list(self.bst.in_order()), [20, 30, 40, 50, 60, 70, 80])
        self.assertEqual(self.bst.height(), 2)

    def test_contains_returns_false_for_nonexistent(self):
        self.fill([50, 30])
        self.assertFalse(self.bst.contains(99))

    def test_remove_leaf_node(self):
        self.fill([50, 30, 70])
        self.assertTrue(self.bst.remove(30))
        self.assertEqual(list(self.bst.in_order()), [50, 70])
        self.assertEqual(self.bst.height(), 1)

    def test_remove_node_with_one_child(self):
        self.fill([50, 30, 20])
        self.assertTrue(self.bst.remove(30))
        self.assertEqual(list(self.bst.pre_order()), [50, 20])

    def test_remove_node_with_two_children(self):
        self.fill([5, 3, 8, 1, 4, 7, 9])
        self.assertTrue(self.bst.remove(5))
        self.assertEqual(list(self.bst.in_order()), [1, 3, 4, 7, 8, 9])
        self.assertEqual(list(self.bst.pre_order()), [7, 3, 1, 4, 8, 9])

    def test_remove_root_with_single_child(self):
        self.fill([50, 70])
        self.assertTrue(self.bst.remove(50))
        self.assertEqual(list(self.bst.in_order()), [70])
        self.assertEqual(self.bst.height(), 0)

    def test_remove_nonexistent_returns_false(self):
        self.fill([50])
        self.assertFalse(self.bst.remove(999))
        self.assertEqual(self.bst.size(), 1)

    def test_remove_from_empty_returns_false(self):
        self.assertFalse(self.bst.remove(999))

    def test_min_max(self):
        self.fill([50, 30, 70, 20, 80])
        self.assertEqual(self.bst.min(), 20)
        self.assertEqual(self.bst.max(), 80)

    def test_post_order(self):
        self.fill([50, 30, 70, 20, 40, 60, 80])
        self.assertEqual(list(self.bst.post_order()), [20, 40, 30, 60, 80, 70, 50])

    def test_clear_makes_tree_empty(self):
        self.fill([50, 30, 70])
        self.bst.clear()
        self.assertTrue(self.bst.is_empty())
        self.assertEqual(list(self.bst.in_order()), [])

    def test_copy_reproduces_shape(self):
        self.fill([50, 30, 70, 20, 40])
        clone = self.bst.copy()
        self.assertEqual(list(clone.pre_order()), list(self.bst.pre_order()))
        self.bst.remove(20)
        self.assertTrue(clone.contains(20))

    def test_sorted_add_degenerates_to_list(self):
        self.bst = BinarySearchTree()
        for i in range(1, 11):
            self.bst.add(i)
        self.assertEqual(self.bst.height(), 9)
        self.assertFalse(self.bst.is_balanced())
        self.bst.validate()

    def test_large_sorted_input_validates_without_recursion(self):
        self.bst = BinarySearchTree()
        for i in range(2000):
            self.bst.add(i)
        self.bst.validate()
        self.assertEqual(list(self.bst.in_order()), list(range(2000)))

    def test_remove_all_elements_one_by_one(self):
        values = [50, 30, 70, 20, 40, 60, 80]
        self.fill(values)
        for v in values:
            self.assertTrue(self.bst.remove(v))
        self.assertTrue(self.bst.is_empty())
        self.assertEqual(self.bst.height(), -1)

    def test_dunders(self):
        self.fill([30, 10, 20])
        self.assertEqual(len(self.bst), 3)
        self.assertIn(10, self.bst)
        self.assertNotIn(99, self.bst)
        self.assertEqual(list(self.bst), [10, 20, 30])
        self.assertEqual(repr(self.bst), "BinarySearchTree([10, 20, 30])")

    def test_works_with_floats(self):
        self.fill([3.14, 2.71, 1.41])
        self.assertEqual(list(self.bst.in_order()), [1.41, 2.71, 3.14])


class TestSharedInterface(unittest.TestCase):
    def test_both_trees_are_ordered_sets(self):
        self.assertIsInstance(AVLTree(), OrderedSet)
        self.assertIsInstance(BinarySearchTree(), OrderedSet)
        self.assertFalse(issubclass(BinarySearchTree, AVLTree))
        self.assertFalse(issubclass(AVLTree, BinarySearchTree))

    def test_copy_keeps_tree_type(self):
        for cls in (AVLTree, BinarySearchTree):
            tree = cls(validate=True)
            tree.add(2)
            tree.add(1)
            clone = tree.copy()
            self.assertIs(type(clone), cls)
            self.assertEqual(str(clone), f"{cls.__name__}(size=2, height=1)")

    def test_compare_is_three_way(self):
        self.assertEqual(compare(1, 2), -1)
        self.assertEqual(compare(2, 1), 1)
        self.assertEqual(compare(2, 2), 0)

    def test_compare_wraps_type_errors(self):
        with self.assertRaises(InvalidKeyError):
            compare(1, "a")

    def test_same_contents_for_same_operations(self):
        trees = [AVLTree(validate=True), BinarySearchTree(validate=True)]
        for tree in trees:
            for v in [8, 3, 10, 1, 6, 14, 4, 7, 13]:
                tree.add(v)
            tree.remove(3)
            tree.remove(14)
            tree.remove(99)
        self.assertEqual(list(trees[0].in_order()), list(trees[1].in_order()))
        self.assertEqual(trees[0].size(), trees[1].size())


if __name__ == '__main__':
    unittest.main()

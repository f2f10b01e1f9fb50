import unittest
import doctest

from treepath import clef
from treepath import construct
from treepath import path

from treepath.clef import (
    BACKWARD,
    FORWARD,
    NONE,
    InsertNode,
    MergeNode,
    MoveNode,
    RemoveNode,
    Score,
    SplitNode,
)
from treepath.construct import transform, transform_score
from treepath.path import (
    PathError,
    ancestors,
    common,
    compare,
    ends_after,
    ends_at,
    ends_before,
    equals,
    is_after,
    is_ancestor,
    is_before,
    is_child,
    is_common,
    is_descendant,
    is_parent,
    is_path,
    is_sibling,
    levels,
    next_path,
    parent,
    previous_path,
    relative,
)


SOME_PATHS = [[], [0], [3], [0, 0], [1, 4], [2, 0, 7], [5, 5, 5, 5]]


class SetSelection(object):
    """Stands in for the editor's non-structural operations (selection, text or attribute changes)."""

    def __init__(self, path):
        self.path = path


def load_tests(loader, tests, ignore):
    # Test the docstrings inside our actual codebase
    tests.addTests(doctest.DocTestSuite(path))
    tests.addTests(doctest.DocTestSuite(clef))
    tests.addTests(doctest.DocTestSuite(construct))

    # Some tests in the doctests style are too large to nicely fit into a docstring; better to keep them separate:
    tests.addTests(doctest.DocFileSuite("doctests/transform_insert_remove.txt"))
    tests.addTests(doctest.DocFileSuite("doctests/transform_merge_split.txt"))
    tests.addTests(doctest.DocFileSuite("doctests/transform_move.txt"))

    return tests


class PredicateTestCase(unittest.TestCase):

    def test_compare(self):
        self.assertEqual(-1, compare([0, 1], [0, 2]))
        self.assertEqual(1, compare([0, 2], [0, 1]))
        self.assertEqual(0, compare([0, 1], [0, 1]))

        # ancestors and descendants are "at" each other for ordering purposes
        self.assertEqual(0, compare([0], [0, 1]))
        self.assertEqual(0, compare([0, 1], [0]))
        self.assertEqual(0, compare([], [3, 4]))

    def test_equals(self):
        self.assertTrue(equals([], []))
        self.assertTrue(equals([0, 1], [0, 1]))
        self.assertFalse(equals([0], [0, 1]))
        self.assertFalse(equals([0, 2], [0, 1]))

    def test_before_and_after(self):
        self.assertTrue(is_before([0], [1, 5]))
        self.assertFalse(is_before([0], [0, 5]))
        self.assertTrue(is_after([2], [1, 9]))
        self.assertFalse(is_after([1, 9], [1]))

    def test_ancestry(self):
        self.assertTrue(is_ancestor([0], [0, 1]))
        self.assertTrue(is_ancestor([], [0]))
        self.assertFalse(is_ancestor([0, 1], [0, 1]))
        self.assertFalse(is_ancestor([0, 1], [0]))
        self.assertFalse(is_ancestor([1], [0, 1]))

        self.assertTrue(is_descendant([0, 1], [0]))
        self.assertFalse(is_descendant([0], [0]))

    def test_parent_and_child(self):
        self.assertTrue(is_parent([0], [0, 1]))
        self.assertFalse(is_parent([0], [0, 1, 2]))
        self.assertTrue(is_child([0, 1], [0]))
        self.assertFalse(is_child([0, 1, 2], [0]))

    def test_is_common(self):
        self.assertTrue(is_common([0], [0]))
        self.assertTrue(is_common([0], [0, 1]))
        self.assertFalse(is_common([0, 1], [0]))

    def test_is_sibling(self):
        self.assertTrue(is_sibling([0, 1], [0, 2]))
        self.assertFalse(is_sibling([0, 1], [0, 1]))
        self.assertFalse(is_sibling([0, 1], [1, 2]))
        self.assertFalse(is_sibling([0], [0, 1]))
        self.assertFalse(is_sibling([], []))

    def test_ends_before(self):
        self.assertTrue(ends_before([0, 1], [0, 2]))
        self.assertTrue(ends_before([0, 1], [0, 2, 0]))
        self.assertFalse(ends_before([0, 1], [0, 1, 0]))
        self.assertFalse(ends_before([1], [0, 1]))
        self.assertFalse(ends_before([], [0]))
        # `another` does not reach the depth of `path`
        self.assertFalse(ends_before([0, 1], [0]))

    def test_ends_at(self):
        self.assertTrue(ends_at([0, 1], [0, 1, 5]))
        self.assertTrue(ends_at([], [3]))
        self.assertFalse(ends_at([0, 1], [0, 2]))
        self.assertFalse(ends_at([0, 1], [0]))

    def test_ends_after(self):
        self.assertTrue(ends_after([0, 3], [0, 2]))
        self.assertTrue(ends_after([0, 3], [0, 2, 9]))
        self.assertFalse(ends_after([0, 1], [0, 2]))
        self.assertFalse(ends_after([0, 3], [0]))
        self.assertFalse(ends_after([], [0]))

    def test_is_path(self):
        self.assertTrue(is_path([]))
        self.assertTrue(is_path([0, 1]))
        self.assertFalse(is_path((0, 1)))
        self.assertFalse(is_path([0, "a"]))
        self.assertFalse(is_path([True]))

    def test_predicates_accept_tuples(self):
        self.assertTrue(is_ancestor((0,), [0, 1]))
        self.assertTrue(equals((0, 1), [0, 1]))


class DerivationTestCase(unittest.TestCase):

    def test_levels(self):
        for p in SOME_PATHS:
            result = levels(p)
            self.assertEqual(len(p) + 1, len(result))
            self.assertEqual([], result[0])
            self.assertEqual(p, result[-1])
            self.assertEqual(list(reversed(result)), levels(p, reverse=True))

    def test_ancestors_are_levels_without_the_path_itself(self):
        for p in SOME_PATHS:
            self.assertEqual(levels(p)[:-1], ancestors(p))
            self.assertEqual(levels(p, reverse=True)[1:], ancestors(p, reverse=True))

    def test_common(self):
        self.assertEqual([0, 1], common([0, 1, 2], [0, 1, 5, 6]))
        self.assertEqual([], common([1], [2]))
        self.assertEqual([4], common([4], [4, 0]))

    def test_next_and_previous(self):
        for p in SOME_PATHS:
            if p == []:
                continue

            self.assertEqual(p, previous_path(next_path(p)))

            if p[-1] != 0:
                self.assertEqual(p, next_path(previous_path(p)))

        self.assertEqual([1, 5], next_path([1, 4]))
        self.assertEqual([1, 3], previous_path([1, 4]))

    def test_parent(self):
        for p in SOME_PATHS:
            if p != []:
                self.assertEqual(p[:-1], parent(p))

    def test_relative(self):
        for p in SOME_PATHS:
            self.assertEqual([], relative(p, p))
            self.assertEqual(p, relative(p, []))

        self.assertEqual([7], relative([2, 0, 7], [2, 0]))

    def test_derivations_of_the_root_are_errors(self):
        self.assertRaises(PathError, next_path, [])
        self.assertRaises(PathError, previous_path, [])
        self.assertRaises(PathError, parent, [])

    def test_previous_of_first_child_is_an_error(self):
        self.assertRaises(PathError, previous_path, [4, 0])

    def test_relative_requires_ancestor_or_equal(self):
        self.assertRaises(PathError, relative, [0, 1], [0, 1, 2])
        self.assertRaises(PathError, relative, [0], [1])

    def test_path_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            parent([])

    def test_derivations_return_fresh_lists(self):
        p = [1, 2]
        self.assertIsNot(p, relative(p, []))
        self.assertIsNot(p, levels(p)[-1])


class TransformTestCase(unittest.TestCase):

    def test_insert_node(self):
        self.assertEqual([1], transform([0], InsertNode([0])))
        self.assertEqual([2], transform([1], InsertNode([0])))
        self.assertEqual([1, 3], transform([0, 3], InsertNode([0])))
        self.assertEqual([0], transform([0], InsertNode([1])))

    def test_remove_node(self):
        self.assertIsNone(transform([1], RemoveNode([1])))
        self.assertIsNone(transform([1, 0], RemoveNode([1])))
        self.assertEqual([1], transform([2], RemoveNode([1])))
        self.assertEqual([0], transform([0], RemoveNode([1])))

    def test_split_node_affinity(self):
        self.assertEqual([1], transform([0], SplitNode([0], 2), affinity=FORWARD))
        self.assertEqual([0], transform([0], SplitNode([0], 2), affinity=BACKWARD))
        self.assertIsNone(transform([0], SplitNode([0], 2), affinity=NONE))

    def test_split_node_affinity_only_matters_at_the_split_node(self):
        for affinity in (FORWARD, BACKWARD, NONE):
            self.assertEqual([1, 1], transform([0, 3], SplitNode([0], 2), affinity=affinity))
            self.assertEqual([2], transform([1], SplitNode([0], 2), affinity=affinity))

    def test_unknown_affinity(self):
        self.assertRaises(AssertionError, transform, [0], SplitNode([0], 2), affinity="sideways")

    def test_move_node_to_itself_is_a_no_op(self):
        operation = MoveNode([1, 2], [1, 2])
        for p in SOME_PATHS + [[1, 2], [1, 2, 0], [1, 3], [1, 1]]:
            self.assertEqual(p, transform(p, operation))

    def test_root_is_never_affected(self):
        for operation in [InsertNode([0]), RemoveNode([0]), MergeNode([1], 2), SplitNode([0], 1), MoveNode([0], [3])]:
            self.assertEqual([], transform([], operation))

    def test_operations_on_the_root(self):
        # nothing to shift at the root level...
        self.assertEqual([0, 1], transform([0, 1], InsertNode([])))
        self.assertEqual([0, 1], transform([0, 1], MergeNode([], 1)))
        self.assertEqual([0, 1], transform([0, 1], SplitNode([], 1)))
        self.assertEqual([0, 1], transform([0, 1], MoveNode([0], [])))
        self.assertEqual([0, 1], transform([0, 1], MoveNode([], [2])))

    def test_removing_the_root_removes_everything(self):
        self.assertIsNone(transform([0, 1], RemoveNode([])))
        self.assertIsNone(transform([3], RemoveNode([])))

        # the root path itself is never affected
        self.assertEqual([], transform([], RemoveNode([])))

    def test_move_destination_above_path(self):
        self.assertEqual([2, 2], transform([1, 2], MoveNode([3], [1])))
        self.assertEqual([0, 3, 0], transform([0, 2, 0], MoveNode([0, 5], [0, 2])))

    def test_non_structural_operations_are_transparent(self):
        self.assertEqual([0, 1], transform([0, 1], SetSelection([0, 1])))
        self.assertEqual([0, 1], transform([0, 1], object()))
        self.assertEqual([0, 1], transform([0, 1], {"type": "set_selection"}))

    def test_transform_does_not_mutate_its_input(self):
        p = [1, 3]
        first = transform(p, RemoveNode([0]))
        second = transform(p, RemoveNode([0]))

        self.assertEqual([1, 3], p)
        self.assertEqual([0, 3], first)
        self.assertEqual(first, second)
        self.assertIsNot(first, second)

    def test_transform_returns_a_fresh_list_even_when_nothing_changes(self):
        p = [0, 1]
        self.assertIsNot(p, transform(p, InsertNode([5])))
        self.assertIsNot(p, transform(p, SetSelection([0])))

        root = []
        self.assertIsNot(root, transform(root, InsertNode([0])))

    def test_transform_accepts_tuples(self):
        self.assertEqual([2, 3], transform((1, 3), InsertNode([0])))

    def test_invalidation_is_logged(self):
        with self.assertLogs("treepath.construct", level="DEBUG") as cm:
            transform([1, 0], RemoveNode([1]))

        self.assertIn("no longer exists", cm.output[0])


class UnverifiedBehaviorTestCase(unittest.TestCase):
    """The behavior below is pinned as-is; whether it is the right answer in all nested situations is an open
    question. If you change any of it, do so deliberately."""

    def test_merge_into_ancestor_shifts_and_offsets_in_one_step(self):
        self.assertEqual([0, 3], transform([1, 0], MergeNode([1], 3)))
        self.assertEqual([2, 2, 3], transform([2, 3, 1], MergeNode([2, 3], 2)))

    def test_move_of_path_inside_moved_node(self):
        # the destination is only adjusted when it lies deeper in the tree than the moved node
        self.assertEqual([2], transform([0], MoveNode([0], [2])))
        self.assertEqual([0, 1, 3], transform([0, 3], MoveNode([0], [1, 1])))

    def test_move_into_later_sibling_of_path(self):
        # `op` ends before `p` and `onp` sits below `p`: shift left, then right at the destination's level
        self.assertEqual([0, 1], transform([1, 0], MoveNode([0], [1, 0])))

    def test_move_destination_after_path_source_before(self):
        self.assertEqual([0], transform([1], MoveNode([0], [2])))
        self.assertEqual([1, 5], transform([2, 5], MoveNode([1], [4])))


class TransformScoreTestCase(unittest.TestCase):

    def test_operations_are_applied_in_order(self):
        score = Score([InsertNode([0]), InsertNode([0]), RemoveNode([1])])
        self.assertEqual([1, 4], transform_score([0, 4], score))

    def test_invalidation_stops_the_score(self):
        self.assertIsNone(transform_score([0, 2], [RemoveNode([0]), InsertNode([0])]))

    def test_empty_score(self):
        p = [3]
        result = transform_score(p, Score([]))
        self.assertEqual(p, result)
        self.assertIsNot(p, result)

    def test_affinity_is_passed_on(self):
        score = [SplitNode([1], 1), InsertNode([0])]
        self.assertEqual([3], transform_score([1], score, affinity=FORWARD))
        self.assertEqual([2], transform_score([1], score, affinity=BACKWARD))
        self.assertIsNone(transform_score([1], score, affinity=NONE))

    def test_replicas_agree(self):
        # two sessions replaying the same log end up with the same cursor
        def log():
            return [InsertNode([0]), SplitNode([1], 2), MoveNode([2], [0]), MergeNode([1], 1), SetSelection([0])]

        for p in SOME_PATHS:
            self.assertEqual(transform_score(p, log()), transform_score(p, Score(log()[:-1])))


class ClefTestCase(unittest.TestCase):

    def test_equality(self):
        self.assertEqual(InsertNode([0, 1]), InsertNode([0, 1]))
        self.assertNotEqual(InsertNode([0, 1]), RemoveNode([0, 1]))
        self.assertNotEqual(MergeNode([0], 1), MergeNode([0], 2))
        self.assertEqual(hash(MoveNode([0], [1])), hash(MoveNode([0], [1])))

    def test_constructor_checks_types(self):
        self.assertRaises(AssertionError, InsertNode, (0, 1))
        self.assertRaises(AssertionError, InsertNode, [0, -1])
        self.assertRaises(AssertionError, MergeNode, [0], "3")

    def test_score_requires_operations(self):
        self.assertRaises(AssertionError, Score, [InsertNode([0]), "not an operation"])


if __name__ == '__main__':
    unittest.main()

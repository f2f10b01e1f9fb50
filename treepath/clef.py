# coding=utf-8
"""
The structural operations that paths are rebased against.

The set of operations is closed: `construct.transform` knows exactly the five below, and treats anything else (e.g.
the editor's text or attribute changes) as transparent to paths.

Operations print as s-expressions:

>>> MoveNode([0, 1], [2])
(move-node [0, 1] [2])
>>> SplitNode([3], 2)
(split-node [3] 2)

And are compared by value:

>>> MergeNode([1, 4], 3) == MergeNode([1, 4], 3)
True
"""

from treepath.utils import pmts, pmts_path

# Affinity: what a path that points exactly at a split node should become. FORWARD: the new right-hand node;
# BACKWARD: the original (left-hand) node; NONE: nothing (the path is invalidated).
FORWARD = "forward"
BACKWARD = "backward"
NONE = None

AFFINITIES = (FORWARD, BACKWARD, NONE)


class Operation(object):

    def __eq__(self, other):
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(repr(self))


class InsertNode(Operation):
    """A new node was inserted at `path`; whatever was at `path` (and its later siblings) moved one to the right."""

    def __init__(self, path):
        pmts_path(path)
        self.path = path

    def __repr__(self):
        return "(insert-node " + repr(self.path) + ")"


class RemoveNode(Operation):
    def __init__(self, path):
        pmts_path(path)
        self.path = path

    def __repr__(self):
        return "(remove-node " + repr(self.path) + ")"


class MergeNode(Operation):
    def __init__(self, path, position):
        """The node at `path` was merged into its previous sibling; `position` is the number of children that sibling
        had before the merge, i.e. the index at which the merged node's children now start."""
        pmts_path(path)
        pmts(position, int)

        self.path = path
        self.position = position

    def __repr__(self):
        return "(merge-node " + repr(self.path) + " " + repr(self.position) + ")"


class SplitNode(Operation):
    def __init__(self, path, position):
        """The node at `path` was split in two; its children from `position` onwards now live in a new right-hand
        sibling."""
        pmts_path(path)
        pmts(position, int)

        self.path = path
        self.position = position

    def __repr__(self):
        return "(split-node " + repr(self.path) + " " + repr(self.position) + ")"


class MoveNode(Operation):
    def __init__(self, path, new_path):
        """new_path :: where the node ends up, expressed in the tree as it was before the node was taken out"""
        pmts_path(path)
        pmts_path(new_path)

        self.path = path
        self.new_path = new_path

    def __repr__(self):
        return "(move-node " + repr(self.path) + " " + repr(self.new_path) + ")"


STRUCTURAL_OPERATIONS = (InsertNode, RemoveNode, MergeNode, SplitNode, MoveNode)


class Score(object):
    """An ordered list of operations, e.g. the edits made since some path was stored.

    >>> score = Score([InsertNode([0]), RemoveNode([2, 1])])
    >>> score
    ((insert-node [0]) (remove-node [2, 1]))
    >>> len(score)
    2
    """

    def __init__(self, operations):
        for operation in operations:
            pmts(operation, Operation)

        self.operations = operations

    def __repr__(self):
        return "(" + " ".join(repr(operation) for operation in self.operations) + ")"

    def __iter__(self):
        return iter(self.operations)

    def __len__(self):
        return len(self.operations)

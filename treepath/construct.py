"""
Tools to "play operations on paths", which may be thought of as "keeping stored paths up to date while the tree they
point into is being edited".

>>> from treepath.clef import InsertNode, RemoveNode, SplitNode, BACKWARD
>>> transform([1, 3], InsertNode([0]))
[2, 3]
>>> transform([1, 3], RemoveNode([1])) is None
True
>>> transform([2], SplitNode([2], 5), affinity=BACKWARD)
[2]

The path that is passed in is never changed; a fresh list is returned each time.
"""

import logging

from treepath.clef import (
    AFFINITIES,
    BACKWARD,
    FORWARD,
    InsertNode,
    MergeNode,
    MoveNode,
    RemoveNode,
    SplitNode,
    STRUCTURAL_OPERATIONS,
)
from treepath.path import ends_before, equals, is_ancestor

logger = logging.getLogger(__name__)


def transform(path, operation, affinity=FORWARD):
    # :: path, operation => path | None (None meaning: the node at `path` no longer exists)
    assert affinity in AFFINITIES, "Unknown affinity: %r" % (affinity,)

    p = list(path)

    if p == []:
        # the root is never affected by any operation
        return p

    if not isinstance(operation, STRUCTURAL_OPERATIONS):
        logger.debug("%r is transparent to paths", operation)
        return p

    op = operation.path
    if not isinstance(operation, RemoveNode) and (
            op == [] or (isinstance(operation, MoveNode) and operation.new_path == [])):
        # no sibling index to shift at the root level; removing the root does invalidate every path below it
        logger.debug("%r addresses the root; ignored", operation)
        return p

    result = _transform(p, path, operation, affinity)

    if result is None:
        logger.debug("%s no longer exists after %r", list(path), operation)

    return result


def _transform(p, path, operation, affinity):
    # p is our own copy of `path` and may be changed in place; `path` itself is only ever read.
    op = operation.path

    if isinstance(operation, InsertNode):
        if equals(op, p) or ends_before(op, p) or is_ancestor(op, p):
            p[len(op) - 1] += 1

        return p

    if isinstance(operation, RemoveNode):
        if equals(op, p) or is_ancestor(op, p):
            return None

        if ends_before(op, p):
            p[len(op) - 1] -= 1

        return p

    if isinstance(operation, MergeNode):
        if equals(op, p) or ends_before(op, p):
            p[len(op) - 1] -= 1

        elif is_ancestor(op, p):
            # Both steps at once: the merged node disappears into its previous sibling, and its children are appended
            # to that sibling's children. Whether this holds in all nested cases is unverified; see tests.py.
            p[len(op) - 1] -= 1
            p[len(op)] += operation.position

        return p

    if isinstance(operation, SplitNode):
        if equals(op, p):
            if affinity == FORWARD:
                p[-1] += 1
            elif affinity == BACKWARD:
                pass  # the path still refers to the original (left-hand) node
            else:
                return None

        elif ends_before(op, p):
            p[len(op) - 1] += 1

        elif is_ancestor(op, p) and path[len(op)] >= operation.position:
            # we are inside the part that moved to the new right-hand node, whose children are numbered from 0
            p[len(op) - 1] += 1
            p[len(op)] -= operation.position

        return p

    if isinstance(operation, MoveNode):
        onp = operation.new_path

        if equals(op, onp):
            return p

        if equals(op, p) or is_ancestor(op, p):
            # the moved node itself, or something inside it: relocate along with it
            destination = list(onp)

            if ends_before(op, onp) and len(op) < len(onp):
                # taking the node out shifts the destination's index at the level of `op`
                destination[len(op) - 1] -= 1

            # Not considered: `p` ending before `onp` without being inside the moved node.
            return destination + p[len(op):]

        if ends_before(onp, p) or equals(onp, p) or is_ancestor(onp, p):
            # Not considered: `op` being an ancestor of `onp`.
            if ends_before(op, p):
                p[len(op) - 1] -= 1

            p[len(onp) - 1] += 1

        elif ends_before(op, p):
            # Unreachable as written: `onp` equal to `p` was already handled by the previous branch.
            if equals(onp, p):
                p[len(onp) - 1] += 1

            p[len(op) - 1] -= 1

        return p

    raise Exception("Unhandled structural operation %r" % operation)


def transform_score(path, score, affinity=FORWARD):
    """Rebases `path` over each of the operations in `score` (any iterable of operations), in order.

    >>> from treepath.clef import Score, MoveNode
    >>> transform_score([0, 2], Score([InsertNode([0]), MoveNode([1], [3])]))
    [3, 2]
    >>> transform_score([0, 2], [RemoveNode([0]), InsertNode([0])]) is None
    True
    """
    result = list(path)

    for operation in score:
        result = transform(result, operation, affinity)
        if result is None:
            return None

    return result

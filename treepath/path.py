"""
Paths are lists of child indices that locate a node in a tree; the empty path is the root:

>>> from treepath.path import *
>>> levels([0, 1, 2])
[[], [0], [0, 1], [0, 1, 2]]

## Relations between paths

`compare` orders paths by their shared prefix only; a path and its ancestor compare as equal, which is what you want
for ordering but not for identity (use `equals` for that):

>>> compare([0, 1], [0, 2]), compare([1], [0, 5]), compare([0], [0, 5])
(-1, 1, 0)
>>> equals([0], [0, 5])
False

The `ends_*` predicates look at the last index of the first path, and the index at that same depth in the second,
under the condition that both share the indices before it. They answer "does an edit at `path` happen to the left of,
at, or to the right of `another`, at the level of the edit?"

>>> ends_before([0, 1], [0, 2, 7])
True
>>> ends_before([0, 1], [1, 2, 7])
False
>>> ends_after([0, 3], [0, 2, 7])
True
>>> ends_at([0, 2], [0, 2, 7])
True

## Errors

Deriving a path that can not exist is a programming error on the side of the caller:

>>> parent([])
Traceback (most recent call last):
treepath.path.PathError: Cannot get the parent path of the root path []
>>> previous_path([3, 0])
Traceback (most recent call last):
treepath.path.PathError: Cannot get the previous path of a first child path [3, 0]; it would have a negative index
"""


class PathError(ValueError):
    pass


def is_path(value):
    return isinstance(value, list) and all(isinstance(i, int) and not isinstance(i, bool) for i in value)


def compare(path, another):
    """Returns -1, 0 or 1 depending on whether `path` is before, at (or above/below), or after `another`."""
    for a, b in zip(path, another):
        if a < b:
            return -1
        if a > b:
            return 1

    return 0


def equals(path, another):
    return len(path) == len(another) and all(a == b for a, b in zip(path, another))


def is_before(path, another):
    return compare(path, another) == -1


def is_after(path, another):
    return compare(path, another) == 1


def is_ancestor(path, another):
    return len(path) < len(another) and compare(path, another) == 0


def is_descendant(path, another):
    return len(path) > len(another) and compare(path, another) == 0


def is_parent(path, another):
    return len(path) + 1 == len(another) and compare(path, another) == 0


def is_child(path, another):
    return len(path) == len(another) + 1 and compare(path, another) == 0


def is_common(path, another):
    """Is `path` an ancestor of, or equal to, `another`?"""
    return len(path) <= len(another) and compare(path, another) == 0


def is_sibling(path, another):
    if len(path) != len(another) or len(path) == 0:
        return False

    return path[-1] != another[-1] and equals(path[:-1], another[:-1])


def ends_before(path, another):
    i = len(path) - 1
    if i < 0 or len(another) <= i:
        return False

    return equals(path[:i], another[:i]) and path[i] < another[i]


def ends_at(path, another):
    i = len(path)
    return equals(path[:i], another[:i])


def ends_after(path, another):
    i = len(path) - 1
    if i < 0 or len(another) <= i:
        return False

    return equals(path[:i], another[:i]) and path[i] > another[i]


def levels(path, reverse=False):
    """
    All paths from the root down to (and including) `path`; shallowest first unless `reverse`.

    >>> levels([4, 2], reverse=True)
    [[4, 2], [4], []]
    """
    result = [list(path[:i]) for i in range(len(path) + 1)]

    if reverse:
        result.reverse()

    return result


def ancestors(path, reverse=False):
    """
    Like `levels`, but without the path itself.

    >>> ancestors([4, 2])
    [[], [4]]
    >>> ancestors([4, 2], reverse=True)
    [[4], []]
    >>> ancestors([])
    []
    """
    result = levels(path, reverse)

    if reverse:
        return result[1:]
    return result[:-1]


def common(path, another):
    """
    >>> common([0, 1, 2], [0, 1, 5, 6])
    [0, 1]
    """
    result = []
    for a, b in zip(path, another):
        if a != b:
            break
        result.append(a)
    return result


def next_path(path):
    if len(path) == 0:
        raise PathError("Cannot get the next path of the root path %s; it has no next index" % list(path))

    return list(path[:-1]) + [path[-1] + 1]


def previous_path(path):
    if len(path) == 0:
        raise PathError("Cannot get the previous path of the root path %s; it has no previous index" % list(path))

    if path[-1] <= 0:
        raise PathError(
            "Cannot get the previous path of a first child path %s; it would have a negative index" % list(path))

    return list(path[:-1]) + [path[-1] - 1]


def parent(path):
    if len(path) == 0:
        raise PathError("Cannot get the parent path of the root path %s" % list(path))

    return list(path[:-1])


def relative(path, ancestor):
    """
    The part of `path` below `ancestor`.

    >>> relative([0, 1, 2], [0])
    [1, 2]
    >>> relative([0, 1, 2], [1])
    Traceback (most recent call last):
    treepath.path.PathError: Cannot get the relative path of [0, 1, 2] inside [1]; it is not above or equal to the path
    """
    if not is_common(ancestor, path):
        raise PathError("Cannot get the relative path of %s inside %s; it is not above or equal to the path" % (
            list(path), list(ancestor)))

    return list(path[len(ancestor):])

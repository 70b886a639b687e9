"""Unbalanced binary search tree keyed by course code.

Keys are compared as plain strings, so callers must hand in normalized
codes. There is no rebalancing: sorted input degrades to a linked list,
which is why descent and traversal are written with loops instead of
recursion.
"""

from course_catalog.course import Course


class _Node:
    __slots__ = ("course", "left", "right")

    def __init__(self, course):
        self.course = course
        self.left = None
        self.right = None


def _own(course):
    return Course(course.code, course.title, course.prerequisites)


class CourseTree:
    def __init__(self):
        self._root = None
        self._size = 0

    def insert_or_update(self, course):
        """Insert a course, or overwrite title/prereqs in place if the code exists.

        Returns True when a new node was created, False on update.
        """
        if self._root is None:
            self._root = _Node(_own(course))
            self._size = 1
            return True

        node = self._root
        while True:
            if course.code == node.course.code:
                node.course.update(course)
                return False
            if course.code < node.course.code:
                if node.left is None:
                    node.left = _Node(_own(course))
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(_own(course))
                    break
                node = node.right

        self._size += 1
        return True

    def find(self, code):
        node = self._root
        while node is not None:
            if code == node.course.code:
                return node.course
            node = node.left if code < node.course.code else node.right
        return None

    def in_order(self):
        """Yield courses in ascending code order (left, node, right)."""
        stack = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.course
            node = node.right

    def clear(self):
        self._root = None
        self._size = 0

    def height(self):
        if self._root is None:
            return 0
        deepest = 0
        stack = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return deepest

    def __len__(self):
        return self._size

    def __contains__(self, code):
        return self.find(code) is not None

    def __iter__(self):
        return self.in_order()

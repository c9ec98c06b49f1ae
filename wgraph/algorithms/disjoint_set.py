"""Disjoint-set union (union-find) over dense integer indices."""

from __future__ import annotations

from typing import List


class DisjointSet:
    """Union-find with path compression and union by size.

    Args:
        size: Number of elements, addressed as ``0..size-1``. Each element
            starts in its own set.
    """

    __slots__ = ("_parent", "_size", "_components")

    def __init__(self, size: int) -> None:
        self._parent: List[int] = list(range(size))
        self._size: List[int] = [1] * size
        self._components = size

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def components(self) -> int:
        """Number of disjoint sets currently tracked."""
        return self._components

    def find(self, x: int) -> int:
        """Return the representative of ``x``'s set, compressing the path."""
        root = x
        parent = self._parent
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets containing ``a`` and ``b``.

        Returns:
            True if two different sets were merged, False if ``a`` and ``b``
            were already in the same set.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        self._components -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

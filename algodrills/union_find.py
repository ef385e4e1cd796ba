"""Weighted union-find (disjoint set) with path compression."""

from __future__ import annotations


class OutOfBoundsError(IndexError):
    """An index fell outside the range of a UnionFind."""

    def __init__(self, index: int, lower: int, upper: int) -> None:
        self.index = index
        self.lower = lower
        self.upper = upper
        super().__init__(f"{index} is not within {lower} and {upper}")


class UnionFind:
    """Disjoint sets over the integers 0..n-1."""

    def __init__(self, n: int) -> None:
        self.n = n
        self._parent = list(range(n))
        self._size = [1] * n

    def _check(self, i: int) -> None:
        if not 0 <= i < self.n:
            raise OutOfBoundsError(i, 0, self.n)

    def _root(self, i: int) -> int:
        parent = self._parent
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    def root(self, i: int) -> int:
        """Return the root of i, compressing the path on the way."""
        self._check(i)
        return self._root(i)

    def find(self, a: int, b: int) -> bool:
        """Return whether a and b are in the same set."""
        self._check(a)
        self._check(b)
        return self._root(a) == self._root(b)

    def union(self, a: int, b: int) -> None:
        """Join the sets of a and b, hanging the smaller tree under the larger."""
        self._check(a)
        self._check(b)
        root_a = self._root(a)
        root_b = self._root(b)
        if self._size[root_a] < self._size[root_b]:
            self._parent[root_a] = self._parent[root_b]
            self._size[root_b] += self._size[root_a]
        else:
            self._parent[root_b] = self._parent[root_a]
            self._size[root_a] += self._size[root_b]
"""Disjoint-set forest over vertex ids.

Union by size, iterative path compression. Kruskal's algorithm builds one
`UnionFind` per invocation from the graph's vertex ids.
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterable


class UnionFind:
    """Partition of a fixed set of ids into disjoint sets.

    Args:
        ids: Initial elements, each in its own singleton set.
    """

    def __init__(self, ids: Iterable[Hashable] = ()) -> None:
        self._parent: Dict[Hashable, Hashable] = {}
        # Only meaningful for roots; drives the union heuristic.
        self._size: Dict[Hashable, int] = {}
        self._set_count = 0
        for item in ids:
            self.add(item)

    def add(self, item: Hashable) -> None:
        """Add ``item`` as a singleton set. Existing items are left untouched."""
        if item in self._parent:
            return
        self._parent[item] = item
        self._size[item] = 1
        self._set_count += 1

    def find(self, item: Hashable) -> Hashable:
        """Return the root of the set containing ``item``.

        Every node on the walked path is re-pointed directly at the root.

        Raises:
            KeyError: If ``item`` was never added.
        """
        parent = self._parent
        root = parent[item]
        while parent[root] != root:
            root = parent[root]
        while item != root:
            parent[item], item = root, parent[item]
        return root

    def union_sets(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets containing ``a`` and ``b``.

        The smaller set is attached under the larger one.

        Returns:
            bool: True if two sets were merged, False if already joined.

        Raises:
            KeyError: If either item was never added.
        """
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size.pop(root_b)
        self._set_count -= 1
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self.find(a) == self.find(b)

    def set_size(self, item: Hashable) -> int:
        """Number of elements in the set containing ``item``."""
        return self._size[self.find(item)]

    @property
    def set_count(self) -> int:
        """Number of disjoint sets."""
        return self._set_count

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, item: object) -> bool:
        return item in self._parent

"""Graph problems: shortest paths, word ladders and disjoint-set unions."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence
from math import inf
from string import ascii_lowercase


class DisjointSet:
    """Union-find over the nodes 0..n-1, with path compression."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._size = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, node: int) -> int:
        """Return the representative of the set holding node."""
        if not 0 <= node < len(self._parent):
            raise IndexError(f"node {node} is out of range")
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union_by_rank(self, u: int, v: int) -> None:
        """Join the sets of u and v, hanging the shallower tree under the deeper."""
        pu, pv = self.find(u), self.find(v)
        if pu == pv:
            return
        if self._rank[pu] < self._rank[pv]:
            self._parent[pu] = pv
        elif self._rank[pv] < self._rank[pu]:
            self._parent[pv] = pu
        else:
            self._parent[pu] = pv
            self._rank[pv] += 1

    def union_by_size(self, u: int, v: int) -> None:
        """Join the sets of u and v, hanging the smaller set under the larger."""
        pu, pv = self.find(u), self.find(v)
        if pu == pv:
            return
        if self._size[pu] < self._size[pv]:
            pu, pv = pv, pu
        self._parent[pv] = pu
        self._size[pu] += self._size[pv]


def ladder_length(begin_word: str, end_word: str, word_list: Iterable[str]) -> int:
    """Return the number of words in the shortest one-letter-change ladder, or 0."""
    unused = set(word_list)
    queue = deque([(begin_word, 1)])
    while queue:
        word, steps = queue.popleft()
        if word == end_word:
            return steps
        for i in range(len(word)):
            prefix, suffix = word[:i], word[i + 1 :]
            for letter in ascii_lowercase:
                candidate = prefix + letter + suffix
                if candidate in unused:
                    unused.remove(candidate)
                    queue.append((candidate, steps + 1))
    return 0


def accounts_merge(accounts: Sequence[Sequence[str]]) -> list[list[str]]:
    """Merge accounts sharing an e-mail address; each result is [name, *sorted emails]."""
    union = DisjointSet(len(accounts))
    owner: dict[str, int] = {}
    for index, (_name, *emails) in enumerate(accounts):
        for email in emails:
            if email in owner:
                union.union_by_rank(index, owner[email])
            else:
                owner[email] = index

    groups: dict[int, list[str]] = {}
    for email, index in owner.items():
        groups.setdefault(union.find(index), []).append(email)
    return [[accounts[root][0], *sorted(emails)] for root, emails in groups.items()]


def network_delay_time(times: Iterable[Sequence[int]], n: int, k: int) -> int:
    """Return the time for a signal from node k to reach all nodes 1..n, or -1."""
    if not 1 <= k <= n:
        raise ValueError(f"source node {k} is out of range")
    adjacency: dict[int, list[tuple[int, int]]] = {}
    for source, target, weight in times:
        adjacency.setdefault(source, []).append((target, weight))

    distance: list[float] = [inf] * (n + 1)
    distance[k] = 0
    heap = [(0, k)]
    while heap:
        current, node = heapq.heappop(heap)
        if current > distance[node]:
            continue
        for neighbour, weight in adjacency.get(node, ()):
            reached = current + weight
            if reached < distance[neighbour]:
                distance[neighbour] = reached
                heapq.heappush(heap, (reached, neighbour))

    slowest = max(distance[1:])
    return -1 if slowest == inf else int(slowest)


def remove_stones(stones: Sequence[Sequence[int]]) -> int:
    """Return how many stones can be removed, each sharing a row or column with another."""
    if not stones:
        return 0
    max_row = max(row for row, _ in stones)
    max_col = max(col for _, col in stones)
    union = DisjointSet(max_row + max_col + 2)
    nodes = set()
    for row, col in stones:
        col_node = col + max_row + 1
        union.union_by_rank(row, col_node)
        nodes.update((row, col_node))
    components = sum(1 for node in nodes if union.find(node) == node)
    return len(stones) - components


def make_connected(n: int, connections: Iterable[Sequence[int]]) -> int:
    """Return the fewest cable moves that connect all n computers, or -1."""
    union = DisjointSet(n)
    redundant = 0
    for a, b in connections:
        if union.find(a) == union.find(b):
            redundant += 1
        else:
            union.union_by_rank(a, b)
    components = sum(1 for node in range(n) if union.find(node) == node)
    return components - 1 if redundant >= components - 1 else -1
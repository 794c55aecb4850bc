"""Graph algorithms: disjoint sets, connectivity, ordering and colouring."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Sequence


class DisjointSet:
    """Union-find over the integers ``0 .. size - 1`` with union by size."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._size = [1] * size

    def find(self, x: int) -> int:
        """The representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b``; False if they were already one set."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self._size[ra] < self._size[rb]:
            self._parent[ra] = rb
            self._size[rb] += self._size[ra]
        else:
            self._parent[rb] = ra
            self._size[ra] += self._size[rb]
        return True


def make_connected(n: int, connections: Sequence[Sequence[int]]) -> int:
    """Cables to move so that all ``n`` computers connect, or -1 if too few."""
    sets = DisjointSet(n)
    extra = sum(1 for u, v in connections if not sets.union(u, v))
    components = sum(1 for node in range(n) if sets.find(node) == node)
    needed = components - 1
    return needed if extra >= needed else -1


def _topological_order(
    num_courses: int, prerequisites: Sequence[Sequence[int]]
) -> list[int]:
    """Courses in an order respecting ``[course, prerequisite]`` pairs, cycles omitted."""
    graph: list[list[int]] = [[] for _ in range(num_courses)]
    indegree = [0] * num_courses
    for course, prerequisite in prerequisites:
        graph[prerequisite].append(course)
        indegree[course] += 1
    queue = deque(node for node in range(num_courses) if indegree[node] == 0)
    order: list[int] = []
    while queue:
        current = queue.popleft()
        order.append(current)
        for following in graph[current]:
            indegree[following] -= 1
            if indegree[following] == 0:
                queue.append(following)
    return order


def can_finish(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Whether all courses can be taken, i.e. the prerequisites have no cycle."""
    return len(_topological_order(num_courses, prerequisites)) == num_courses


def find_order(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> list[int]:
    """An order in which to take all courses, or an empty list if none exists."""
    order = _topological_order(num_courses, prerequisites)
    return order if len(order) == num_courses else []


def count_provinces(is_connected: Sequence[Sequence[int]]) -> int:
    """Number of connected groups in an adjacency matrix."""
    n = len(is_connected)
    sets = DisjointSet(n)
    for i, row in enumerate(is_connected):
        for j in range(i + 1, n):
            if row[j] == 1:
                sets.union(i, j)
    return len({sets.find(node) for node in range(n)})


def merge_accounts(accounts: Sequence[Sequence[str]]) -> list[list[str]]:
    """Merge accounts sharing an e-mail; each result is a name then sorted e-mails."""
    sets = DisjointSet(len(accounts))
    owner: dict[str, int] = {}
    for index, (_, *emails) in enumerate(accounts):
        for email in emails:
            first = owner.setdefault(email, index)
            if first != index:
                sets.union(index, first)
    groups: defaultdict[int, list[str]] = defaultdict(list)
    for email, index in owner.items():
        groups[sets.find(index)].append(email)
    return [
        [accounts[root][0], *sorted(emails)] for root, emails in sorted(groups.items())
    ]


def is_bipartite(graph: Sequence[Sequence[int]]) -> bool:
    """Whether the nodes can be two-coloured with no edge inside one colour."""
    colours: list[int | None] = [None] * len(graph)
    for start in range(len(graph)):
        if colours[start] is not None:
            continue
        colours[start] = 0
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbour in graph[node]:
                if colours[neighbour] is None:
                    colours[neighbour] = 1 - colours[node]
                    stack.append(neighbour)
                elif colours[neighbour] == colours[node]:
                    return False
    return True


def remove_stones(stones: Sequence[Sequence[int]]) -> int:
    """Most stones removable when a stone goes only if another shares its row or column."""
    if not stones:
        return 0
    rows = max(row for row, _ in stones) + 1
    cols = max(col for _, col in stones) + 1
    sets = DisjointSet(rows + cols)
    nodes: set[int] = set()
    for row, col in stones:
        column_node = rows + col
        nodes.update((row, column_node))
        sets.union(row, column_node)
    return len(stones) - len({sets.find(node) for node in nodes})
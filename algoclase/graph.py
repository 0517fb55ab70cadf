"""Undirected graph with a search for its longest simple cycle."""

from __future__ import annotations

import sys
from collections.abc import Sequence


class Graph:
    """Undirected graph of integer-identified nodes without parallel edges."""

    def __init__(self) -> None:
        # Nodes and neighbours are kept in insertion order; traversal visits
        # the most recently added first.
        self._adjacency: dict[int, list[int]] = {}

    def __len__(self) -> int:
        return len(self._adjacency)

    def insert_node(self, node_id: int) -> None:
        """Add a node; raise ValueError if it already exists."""
        if node_id in self._adjacency:
            raise ValueError("Node already exists")
        self._adjacency[node_id] = []

    def delete_node(self, node_id: int) -> None:
        """Remove a node together with every edge touching it."""
        if node_id not in self._adjacency:
            raise KeyError("Node does not exist")
        for neighbor in self._adjacency.pop(node_id):
            self._adjacency[neighbor].remove(node_id)

    def has_node(self, node_id: int) -> bool:
        """Return True if the node exists; negative ids never exist."""
        return node_id >= 0 and node_id in self._adjacency

    def insert_edge(self, x: int, y: int) -> None:
        """Connect ``x`` and ``y``."""
        if x < 0 or y < 0:
            raise ValueError("Invalid ID")
        if x == y:
            raise ValueError("Can't insert an edge between the same node")
        if len(self._adjacency) <= 1:
            raise ValueError("graph is empty or only have 1 Node")
        if x not in self._adjacency or y not in self._adjacency:
            raise KeyError(
                f"one or both nodes do not exist in trying to insert Edge ({x}, {y})"
            )
        if y in self._adjacency[x]:
            raise ValueError("the Edge already exists")
        self._adjacency[x].append(y)
        self._adjacency[y].append(x)

    def delete_edge(self, x: int, y: int) -> None:
        """Remove the edge between ``x`` and ``y``."""
        if len(self._adjacency) <= 1:
            raise ValueError("graph is empty or only have 1 Node")
        if x not in self._adjacency or y not in self._adjacency:
            raise KeyError(
                f"one or both nodes do not exist in trying to delete Edge ({x}, {y})"
            )
        if x == y:
            raise ValueError("Can't delete an edge between the same node")
        if y not in self._adjacency[x]:
            raise KeyError(f"no Edge ({x}, {y})")
        self._adjacency[x].remove(y)
        self._adjacency[y].remove(x)

    def neighbors(self, node_id: int) -> list[int]:
        """Return the neighbours of a node, most recently connected first."""
        if node_id not in self._adjacency:
            raise KeyError("Node does not exist")
        return list(reversed(self._adjacency[node_id]))

    def max_cycle_size(self) -> int:
        """Return the number of nodes in the longest simple cycle, or 0."""
        visited: set[int] = set()
        longest = 0
        for start in reversed(list(self._adjacency)):
            if start not in visited:
                longest = max(longest, self._longest_cycle_from(start, visited))
        return longest

    def _longest_cycle_from(self, start: int, visited: set[int]) -> int:
        depth_on_path: dict[int, int] = {}

        def search(current: int, parent: int | None, depth: int) -> int:
            visited.add(current)
            depth_on_path[current] = depth
            longest = 0
            for neighbor in reversed(self._adjacency[current]):
                if neighbor not in depth_on_path:
                    longest = max(longest, search(neighbor, current, depth + 1))
                elif neighbor != parent:
                    longest = max(longest, depth - depth_on_path[neighbor] + 1)
            del depth_on_path[current]
            return longest

        return search(start, None, 0)


def _connect(graph: Graph, x: int, y: int) -> None:
    try:
        graph.insert_edge(x, y)
    except (KeyError, ValueError) as error:
        print(error.args[0], file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print each longest cycle."""
    tests = int(input("Number of tests: "))
    if tests <= 0:
        raise ValueError("the number of tests must be positive")

    for case in range(1, tests + 1):
        node_count = int(input("Number of nodes: "))
        if node_count <= 3:
            raise ValueError("the number of nodes must be greater than 3")

        graph = Graph()
        for node in range(3):
            graph.insert_node(node)
        for x, y in ((0, 1), (0, 2), (1, 2)):
            graph.insert_edge(x, y)

        for node in range(3, node_count):
            graph.insert_node(node)
            fields = input("Connections: ").split()
            if len(fields) < 2:
                raise ValueError("each node needs two connections")
            first, second = int(fields[0]), int(fields[1])
            _connect(graph, node, first - 1)
            _connect(graph, node, second - 1)

        print(f"Caso #{case}: {graph.max_cycle_size()}")
    return 0
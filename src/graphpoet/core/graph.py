from __future__ import annotations

from typing import Dict, Set

from .exceptions import InvalidArgumentError


class WeightedDigraph:
    """A minimal directed graph with string vertices and positive int weights."""

    def __init__(self) -> None:
        self._vertices: Set[str] = set()
        self._adjacency: Dict[str, Dict[str, int]] = {}

    def __len__(self) -> int:
        return len(self._vertices)

    def _add_vertex(self, vertex: str) -> None:
        if vertex not in self._vertices:
            self._vertices.add(vertex)
            self._adjacency.setdefault(vertex, {})

    def set(self, source: str, target: str, weight: int) -> int:
        """Set the weight of source -> target, returning the previous weight (0 if none)."""

        if isinstance(weight, bool) or not isinstance(weight, int) or weight <= 0:
            raise InvalidArgumentError(
                f"Edge weight must be a positive integer, got {weight!r} for {source!r} -> {target!r}"
            )
        self._add_vertex(source)
        self._add_vertex(target)
        previous = self._adjacency[source].get(target, 0)
        self._adjacency[source][target] = weight
        return previous

    def vertices(self) -> Set[str]:
        return set(self._vertices)

    def targets(self, vertex: str) -> Dict[str, int]:
        return dict(self._adjacency.get(vertex, {}))

    def weight(self, source: str, target: str) -> int:
        return self._adjacency.get(source, {}).get(target, 0)

    def has_vertex(self, vertex: str) -> bool:
        return vertex in self._vertices

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency.values())

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Union

from .corpus import read_tokens, tokenize
from .exceptions import InvariantViolation
from .graph import WeightedDigraph

logger = logging.getLogger(__name__)


class AffinityPoetEngine:
    """Graph-based poetry generator.

    The engine derives a word affinity graph from a corpus. Vertices are
    lowercased words; the weight of the edge w1 -> w2 is the number of times
    w2 immediately follows w1 in the corpus. The corpus

        Hello, HELLO, hello, goodbye!

    yields ``hello, -> hello,`` with weight 2 and ``hello, -> goodbye!`` with
    weight 1.

    A poem is produced by inserting, between every adjacent pair of input
    words w1 w2, the bridge word b maximizing weight(w1 -> b) + weight(b -> w2)
    over all two-edge paths. Ties go to the lexicographically smallest bridge.
    Input words keep their case, bridge words are lowercase, and words are
    separated by single spaces. With the corpus

        This is a test of the Mugar Omni Theater sound system.

    the input ``Test the system.`` becomes ``Test of the system.``.

    The graph is never modified after construction.
    """

    def __init__(self, tokens: Iterable[str]) -> None:
        self._graph = WeightedDigraph()

        previous: Optional[str] = None
        for token in tokens:
            word = token.lower()
            if previous is not None:
                self._graph.set(previous, word, self._graph.weight(previous, word) + 1)
            previous = word

        self._check_rep()
        logger.info(
            f"Built affinity graph with {len(self._graph)} vertices and {self._graph.edge_count()} edges"
        )

    @classmethod
    def from_text(cls, text: str) -> "AffinityPoetEngine":
        return cls(tokenize(text))

    @classmethod
    def from_file(cls, path: Union[str, Path], encoding: str = "utf-8") -> "AffinityPoetEngine":
        """Build an engine from a corpus file; raises ResourceError if it cannot be read."""

        return cls(read_tokens(path, encoding=encoding))

    def _check_rep(self) -> None:
        for vertex in self._graph.vertices():
            if not vertex:
                raise InvariantViolation("empty vertex in affinity graph")
            if vertex != vertex.lower():
                raise InvariantViolation(f"vertex {vertex!r} is not lowercase")
            if any(ch.isspace() for ch in vertex):
                raise InvariantViolation(f"vertex {vertex!r} contains whitespace")
            for target, weight in self._graph.targets(vertex).items():
                if not self._graph.has_vertex(target):
                    raise InvariantViolation(f"edge {vertex!r} -> {target!r} points outside the graph")
                if isinstance(weight, bool) or not isinstance(weight, int) or weight <= 0:
                    raise InvariantViolation(f"edge {vertex!r} -> {target!r} has weight {weight!r}")

    def vertices(self) -> Set[str]:
        return self._graph.vertices()

    def targets(self, word: str) -> Dict[str, int]:
        return self._graph.targets(word.lower())

    def affinity(self, source: str, target: str) -> int:
        """Number of times ``target`` directly follows ``source`` in the corpus."""

        return self._graph.weight(source.lower(), target.lower())

    def bridge(self, source: str, target: str) -> Optional[str]:
        """Best bridge word between two words, or None when no two-edge path exists."""

        source, target = source.lower(), target.lower()
        best: Optional[str] = None
        best_weight = 0
        # sorted so that equal weights resolve to the smallest word
        for candidate, first_hop in sorted(self._graph.targets(source).items()):
            second_hop = self._graph.weight(candidate, target)
            if second_hop <= 0:
                continue
            combined = first_hop + second_hop
            if combined > best_weight:
                best, best_weight = candidate, combined

        if best is not None:
            logger.debug(f"Bridge {source!r} -> {best!r} -> {target!r} (weight {best_weight})")
        return best

    def poem(self, text: str) -> str:
        words = text.split()
        if not words:
            return ""

        out: List[str] = []
        for word, following in zip(words, words[1:]):
            out.append(word)
            bridge = self.bridge(word, following)
            if bridge is not None:
                out.append(bridge)
        out.append(words[-1])
        return " ".join(out)

    def describe(self) -> str:
        lines = ["Affinity graph:"]
        for vertex in sorted(self._graph.vertices()):
            edges = ", ".join(
                f"{target}: {weight}" for target, weight in sorted(self._graph.targets(vertex).items())
            )
            lines.append(f"{vertex} -> {{{edges}}}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"AffinityPoetEngine(vertices={len(self._graph)}, edges={self._graph.edge_count()})"

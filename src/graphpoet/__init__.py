"""graphpoet: bridge-word poems from a word affinity graph.

The core builds a weighted directed graph of word adjacencies from a corpus
and inserts the strongest two-hop bridge word between adjacent input words.
"""

from .core import AffinityPoetEngine, WeightedDigraph

__all__ = [
    "core",
    "AffinityPoetEngine",
    "WeightedDigraph",
]

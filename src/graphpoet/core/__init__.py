from .corpus import iter_tokens, read_tokens, tokenize
from .exceptions import (
    ConfigurationError,
    GraphPoetError,
    InvalidArgumentError,
    InvariantViolation,
    ResourceError,
)
from .graph import WeightedDigraph
from .poet import AffinityPoetEngine

__all__ = [
    "AffinityPoetEngine",
    "WeightedDigraph",
    "tokenize",
    "iter_tokens",
    "read_tokens",
    "GraphPoetError",
    "ResourceError",
    "ConfigurationError",
    "InvalidArgumentError",
    "InvariantViolation",
]

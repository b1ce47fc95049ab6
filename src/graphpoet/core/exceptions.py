"""
Custom exceptions for graphpoet
"""

class GraphPoetError(Exception):
    """Base exception for recoverable graphpoet errors"""
    pass

class ResourceError(GraphPoetError):
    """Corpus could not be located or read"""
    pass

class ConfigurationError(GraphPoetError):
    """Configuration-related errors"""
    pass

class InvalidArgumentError(GraphPoetError, ValueError):
    """Rejected argument, e.g. a non-positive edge weight"""
    pass

class InvariantViolation(AssertionError):
    """Affinity graph representation invariant is broken.

    Signals a construction bug and is not a GraphPoetError.
    """
    pass

"""Expectation-based mock objects: matchers, call counts, sequences and contexts."""

__version__ = "0.1.0"
__all__ = ["errors", "times", "sequence", "predicate", "expectation", "mock"]
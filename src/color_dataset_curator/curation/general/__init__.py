"""
general package.
===============

Does: Domain-agnostic helpers of the curation stack: edit distance and fuzzy
      matching, the semantic oracle protocol and its default implementation,
      config loading, env tunables and tracing.
"""

from .types import ProgressSink, SemanticOracle, Semantics, no_progress

__all__ = ["ProgressSink", "SemanticOracle", "Semantics", "no_progress"]

"""
distribution package.
====================

Does: Spectrum coverage analysis, per-color quality scoring and quality-driven
      dataset pruning.
"""

from .pruner import PruneOptions, PruneResult, prune, score_all
from .quality import QualityMetrics, score_color
from .spectrum import SpectrumCoverage, analyze_coverage, get_critical_buckets

__all__ = [
    "SpectrumCoverage",
    "analyze_coverage",
    "get_critical_buckets",
    "QualityMetrics",
    "score_color",
    "PruneOptions",
    "PruneResult",
    "prune",
    "score_all",
]

"""
semantics package.
=================

Does: Name-semantics oracle used by deduplication: kernel extraction and
      name/family fit scoring over a JSON kernel lexicon.
"""

from .analyzer import LexiconSemanticAnalyzer, get_default_analyzer, load_kernel_lexicon

__all__ = ["LexiconSemanticAnalyzer", "get_default_analyzer", "load_kernel_lexicon"]

"""
coldflow Utilities
==================

Helpers for introspecting operator chains.
"""

from .chain import describe, find_ultimate_source, iter_lineage

__all__ = ["describe", "find_ultimate_source", "iter_lineage"]

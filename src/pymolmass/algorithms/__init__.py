"""
Computational algorithms for compound evaluation.

This module resolves formula tokens against the element table, accumulates
the molar mass and collects the distinct element names.
"""

from .aggregation import CompoundResult, compute

__all__ = [
    "CompoundResult",
    "compute"
]

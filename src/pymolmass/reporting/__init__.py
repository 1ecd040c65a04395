"""Sentence rendering for compound results."""

from .formatter import format_element_names, format_weight

__all__ = [
    "format_element_names",
    "format_weight"
]

"""
Core data structures for compound evaluation.

This module contains the element records, the element table used for
symbol lookup, the ordered set used to collect element names, and the
exception hierarchy shared by the rest of the pymolmass library.
"""

from .elements import Element, ElementTable
from .ordered_set import OrderedSet
from .exceptions import (
    CompoundError, EmptyTableError, ElementFileError, SettingsError,
    FormulaError, EmptyFormulaError, UnknownSymbolError, InvalidQuantityError
)

__all__ = [
    "Element",
    "ElementTable",
    "OrderedSet",
    "CompoundError",
    "EmptyTableError",
    "ElementFileError",
    "SettingsError",
    "FormulaError",
    "EmptyFormulaError",
    "UnknownSymbolError",
    "InvalidQuantityError"
]

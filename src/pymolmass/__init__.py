"""
PyMolMass - A Python library for molar mass calculation of chemical formulas.

This library loads a reference table of element symbols, names and atomic
weights, tokenizes free-form formula text such as 'H2O' or 'C6H12O6', and
reports the total weight together with the distinct elements involved.

Key Features:
- Element reference table loaded once from a whitespace-delimited text file
- Lenient formula tokenizer with multi-digit atom counts
- Whole-formula rejection on unknown symbols (no partial weights)
- Alphabetical element listing with correct sentence grammar
- YAML settings and an interactive command line interface

Main Components:
- Core: Element records, the element table, the ordered set and exceptions
- Parsing: Formula tokenizing, reference file loading, settings and API
- Algorithms: Weight aggregation and element name collection
- Reporting: Sentence rendering
- Data: Bundled element table and processing constants
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("pymolmass")
except PackageNotFoundError:
    __version__ = "0.1.0+unknown"  # Fallback version

# Core definitions
from .core.elements import Element, ElementTable
from .core.ordered_set import OrderedSet
from .core.exceptions import (
    CompoundError, EmptyTableError, ElementFileError, FormulaError,
    EmptyFormulaError, UnknownSymbolError, InvalidQuantityError
)

# Parsing and main API functions
from .parsing.tokenizer import FormulaToken, FormulaTokenizer, tokenize
from .parsing.api import CompoundReport, analyze_compound, load_element_table

# Algorithms
from .algorithms.aggregation import CompoundResult, compute

# Reporting
from .reporting.formatter import format_element_names, format_weight

__all__ = [
    # Version
    '__version__',

    # Core classes
    'Element',
    'ElementTable',
    'OrderedSet',

    # Exceptions
    'CompoundError',
    'EmptyTableError',
    'ElementFileError',
    'FormulaError',
    'EmptyFormulaError',
    'UnknownSymbolError',
    'InvalidQuantityError',

    # Main API
    'load_element_table',
    'analyze_compound',
    'CompoundReport',

    # Tokenizing and aggregation
    'FormulaToken',
    'FormulaTokenizer',
    'tokenize',
    'CompoundResult',
    'compute',

    # Reporting
    'format_element_names',
    'format_weight'
]

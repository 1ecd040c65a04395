"""Custom exceptions for pymolmass core functionality."""
import logging
from typing import Optional, Union
from pathlib import Path

from pymolmass.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


class CompoundError(Exception):
    """Base exception for all compound-related errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.debug("%s raised: %s", type(self).__name__, message)


class EmptyTableError(CompoundError):
    """Exception raised when an element table is built from zero records."""

    def __init__(self, message="Element table cannot be empty"):
        super().__init__(message)


class ElementFileError(CompoundError):
    """Exception raised when the element reference file cannot be read or parsed."""

    def __init__(self, message, path: Union[str, Path, None] = None, line_number: Optional[int] = None):
        self.path = path
        self.line_number = line_number
        super().__init__(message)


class SettingsError(CompoundError):
    """Exception raised when a settings file fails validation."""


class FormulaError(CompoundError):
    """Base exception for a formula that cannot be evaluated."""

    def __init__(self, message, formula: str = ""):
        self.formula = formula
        super().__init__(message)


class EmptyFormulaError(FormulaError):
    """Exception raised when a formula contains no element symbol at all."""

    def __init__(self, formula: str):
        super().__init__(ErrorMessages.NOT_A_VALID_COMPOUND.format(formula=formula), formula)


class UnknownSymbolError(FormulaError):
    """Exception raised when a symbol is not present in the element table."""

    def __init__(self, symbol: str, formula: str = ""):
        self.symbol = symbol
        super().__init__(ErrorMessages.NO_SUCH_ELEMENT.format(symbol=symbol), formula)


class InvalidQuantityError(FormulaError):
    """Exception raised when a symbol carries an explicit count of zero."""

    def __init__(self, symbol: str, quantity: int, formula: str = ""):
        self.symbol = symbol
        self.quantity = quantity
        super().__init__(f"{symbol}{quantity}: atom count must be at least 1", formula)

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ProcessingConstants:
    """Processing constants used by the tokenizer, aggregator and report."""
    # Reference data
    SYMBOL_REGEX: Final[str] = r'^[A-Z][a-z]?$'
    MIN_ATOMIC_WEIGHT: Final[float] = 0.0
    # Report
    DEFAULT_DECIMALS: Final[int] = 2
    DEFAULT_PROMPT: Final[str] = "Chemical composition? "
    # Logging
    DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
    LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s -> %(message)s"
    LOG_LEVELS: Final[tuple] = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    NO_SUCH_ELEMENT: Final[str] = "{symbol}: no such element"
    NOT_A_VALID_COMPOUND: Final[str] = "{formula}: not a valid compound"
    MALFORMED_LINE: Final[str] = "{path}: malformed line {line}"
    NO_ATOMIC_WEIGHTS: Final[str] = "{path}: no atomic weights there!"


@dataclass(frozen=True)
class FileConstants:
    """File processing related constants."""
    DEFAULT_ENCODING: Final[str] = 'utf-8'
    COMMENT_CHAR: Final[str] = '#'
    RECORD_COLUMNS: Final[tuple] = ('weight', 'symbol', 'name')
    DEFAULT_ELEMENT_PACKAGE: Final[str] = 'pymolmass.data.elements'
    DEFAULT_ELEMENT_FILE: Final[str] = 'elements.txt'

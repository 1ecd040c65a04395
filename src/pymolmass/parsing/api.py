import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from pymolmass.algorithms.aggregation import compute
from pymolmass.core.elements import ElementTable
from pymolmass.core.exceptions import EmptyTableError
from pymolmass.data.constants import ErrorMessages
from pymolmass.parsing.io.data_handler import get_default_element_file, load_element_records
from pymolmass.parsing.tokenizer import tokenize
from pymolmass.reporting.formatter import format_element_names

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompoundReport:
    formula: str
    total_weight: float
    element_names: List[str]
    sentence: str


def load_element_table(file_path: Union[str, Path, None] = None) -> ElementTable:
    """
    Load the element reference file and build the lookup table.

    This is the start-up step: it is done once and the resulting table is
    shared, read-only, by every compound evaluation.
    Args:
        file_path: Path to a "<weight> <symbol> <name>" text file.
                   The table bundled with the package is used when omitted.
    Returns:
        ElementTable keyed by symbol
    Raises:
        ElementFileError: If the file is missing or contains a malformed line
        EmptyTableError: If the file holds no records
    Examples:
        table = load_element_table()
        table = load_element_table('weights.txt')
    """
    path = Path(file_path) if file_path is not None else get_default_element_file()
    logger.info("Loading element table from: %s", path)
    records = load_element_records(path)
    if not records:
        raise EmptyTableError(ErrorMessages.NO_ATOMIC_WEIGHTS.format(path=path))
    return ElementTable.build((record.symbol, record.name, record.weight) for record in records)


def analyze_compound(formula: str, table: ElementTable) -> CompoundReport:
    """
    Evaluate one formula: tokenize, resolve against *table*, and render the element sentence.
    Args:
        formula: Formula text such as 'H2O' or 'C6H12O6', without a line terminator
        table: Element table from load_element_table
    Returns:
        CompoundReport with the total weight, the sorted element names and the sentence
    Raises:
        FormulaError: If the formula has no symbols, an unknown symbol or a zero count.
                      No partial weight is reported in that case.
    """
    tokens = tokenize(formula)
    result = compute(tokens, table, formula=formula)
    names = result.sorted_names()
    report = CompoundReport(
        formula=formula,
        total_weight=result.total_weight,
        element_names=names,
        sentence=format_element_names(names),
    )
    logger.info("Analyzed %s: %.4f g/mol, %d elements", formula, report.total_weight, len(names))
    return report


def get_element_table_info(table: ElementTable) -> dict:
    """
    Summary information about a loaded element table.
    Example:
        info = get_element_table_info(load_element_table())
        print(f"Elements: {info['total_elements']}")
    """
    elements = list(table)
    lightest: Optional[str] = min(elements, key=lambda e: e.weight).symbol if elements else None
    heaviest: Optional[str] = max(elements, key=lambda e: e.weight).symbol if elements else None
    return {
        'total_elements': len(elements),
        'symbols': table.symbols,
        'lightest': lightest,
        'heaviest': heaviest,
    }

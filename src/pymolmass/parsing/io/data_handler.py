import csv
import io
import logging
import numpy as np
import pandas as pd
from importlib import resources
from pathlib import Path
from typing import List, NamedTuple, Tuple, Union

from pymolmass.core.exceptions import ElementFileError
from pymolmass.data.constants import ProcessingConstants, ErrorMessages, FileConstants

logger = logging.getLogger(__name__)


class ElementRecord(NamedTuple):
    """One line of the element reference file."""
    weight: float
    symbol: str
    name: str


def get_default_element_file() -> Path:
    """Return the path of the element table bundled with the package."""
    resource = resources.files(FileConstants.DEFAULT_ELEMENT_PACKAGE) / FileConstants.DEFAULT_ELEMENT_FILE
    return Path(str(resource))


def load_element_records(file_path: Union[str, Path]) -> List[ElementRecord]:
    """
    Reads element records from a whitespace-delimited text file.
    Each non-blank line holds "<weight> <symbol> <name>". Text after '#' is ignored.
    Args:
        file_path: Path to the element reference file
    Returns:
        List of ElementRecord in file order (empty if the file has no records)
    Raises:
        ElementFileError: If the file does not exist, cannot be read, or contains a malformed line
    """
    path = Path(file_path)
    if not path.exists():
        raise ElementFileError(f"{path}: file not found", path=path)
    if not path.is_file():
        raise ElementFileError(f"{path}: not a file", path=path)
    try:
        text = path.read_text(encoding=FileConstants.DEFAULT_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise ElementFileError(f"{path}: {str(e)}", path=path) from e
    records = parse_element_records(text, source=str(path))
    logger.info("Loaded %d element records from %s", len(records), path)
    return records


def parse_element_records(text: str, source: str = "<string>") -> List[ElementRecord]:
    """Parse element records from the text of a reference file."""
    line_numbers, lines = _collect_record_lines(text, source)
    if not lines:
        logger.warning("No element records found in %s", source)
        return []
    try:
        # Quote characters are data: a quoted symbol must fail the symbol check
        frame = pd.read_csv(
            io.StringIO("\n".join(lines)),
            sep=r'\s+',
            header=None,
            names=list(FileConstants.RECORD_COLUMNS),
            dtype=str,
            keep_default_na=False,
            quoting=csv.QUOTE_NONE,
        )
    except pd.errors.ParserError as e:
        logger.debug("pandas could not tokenize %s: %s", source, e)
        raise ElementFileError(f"{source}: {str(e)}", path=source) from e
    weights, symbols, names = _validate_record_frame(frame, line_numbers, source)
    return [ElementRecord(float(w), s, n) for w, s, n in zip(weights, symbols, names)]


def _collect_record_lines(text: str, source: str) -> Tuple[List[int], List[str]]:
    """Strip comments and blank lines, checking that every remaining line has three fields."""
    expected = len(FileConstants.RECORD_COLUMNS)
    line_numbers: List[int] = []
    lines: List[str] = []
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        content = raw_line.split(FileConstants.COMMENT_CHAR, 1)[0].strip()
        if not content:
            continue
        if len(content.split()) != expected:
            logger.debug("Line %d of %s has %d fields, expected %d",
                         line_number, source, len(content.split()), expected)
            raise ElementFileError(ErrorMessages.MALFORMED_LINE.format(path=source, line=line_number),
                                   path=source, line_number=line_number)
        line_numbers.append(line_number)
        lines.append(content)
    return line_numbers, lines


def _validate_record_frame(frame: pd.DataFrame, line_numbers: List[int],
                           source: str) -> Tuple[np.ndarray, List[str], List[str]]:
    """Convert the weight column and validate weights and symbols row by row."""
    weights = np.asarray(pd.to_numeric(frame['weight'], errors='coerce'), dtype=np.float64)
    valid_weight = np.isfinite(weights) & (weights > ProcessingConstants.MIN_ATOMIC_WEIGHT)
    valid_symbol = frame['symbol'].str.match(ProcessingConstants.SYMBOL_REGEX).to_numpy(dtype=bool)
    invalid_rows = np.flatnonzero(~(valid_weight & valid_symbol))
    if invalid_rows.size > 0:
        row = int(invalid_rows[0])
        line_number = line_numbers[row]
        logger.debug("Invalid record on line %d of %s: weight=%r symbol=%r",
                     line_number, source, frame['weight'].iloc[row], frame['symbol'].iloc[row])
        raise ElementFileError(ErrorMessages.MALFORMED_LINE.format(path=source, line=line_number),
                               path=source, line_number=line_number)
    return weights, frame['symbol'].tolist(), frame['name'].tolist()

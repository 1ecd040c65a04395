"""Command line interface: load an element table once, then evaluate formulas."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from pymolmass import __version__
from pymolmass.core.elements import ElementTable
from pymolmass.core.exceptions import (
    ElementFileError, EmptyTableError, FormulaError, SettingsError, UnknownSymbolError
)
from pymolmass.data.constants import ErrorMessages, ProcessingConstants
from pymolmass.parsing.api import analyze_compound, load_element_table
from pymolmass.parsing.config.settings_parser import Settings, load_settings
from pymolmass.reporting.formatter import format_weight

logger = logging.getLogger(__name__)


def setup_logging(level: str = ProcessingConstants.DEFAULT_LOG_LEVEL) -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=ProcessingConstants.LOG_FORMAT,
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pymolmass",
        description="Compute the molar mass of chemical formulas and list the elements they contain.",
    )
    parser.add_argument(
        "weightsfile",
        nargs="?",
        help="Element reference file with '<weight> <symbol> <name>' per line "
             "(default: the table bundled with pymolmass).",
    )
    parser.add_argument(
        "--config",
        help="YAML settings file (element_file, decimals, log_level, prompt).",
    )
    parser.add_argument(
        "-f", "--formula",
        dest="formulas",
        action="append",
        help="Evaluate this formula instead of reading from stdin. May be repeated.",
    )
    parser.add_argument(
        "--decimals",
        type=int,
        help="Decimal places for the atomic weight (default: 2).",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=ProcessingConstants.LOG_LEVELS,
        type=str.upper,
        help="Logging level (default: WARNING).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"pymolmass {__version__}",
    )
    return parser


def evaluate(formula: str, table: ElementTable, decimals: int,
             out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> bool:
    """Evaluate one formula and print the report or the error. Returns True on success."""
    out = out or sys.stdout
    err = err or sys.stderr
    try:
        report = analyze_compound(formula, table)
    except UnknownSymbolError as e:
        print(str(e), file=err)
        print(ErrorMessages.NOT_A_VALID_COMPOUND.format(formula=formula), file=err)
        return False
    except FormulaError as e:
        logger.debug("Formula rejected: %s", e)
        print(ErrorMessages.NOT_A_VALID_COMPOUND.format(formula=formula), file=err)
        return False
    print(format_weight(formula, report.total_weight, decimals), file=out)
    print(report.sentence, file=out)
    return True


def run_interactive(table: ElementTable, settings: Settings, stdin: Optional[TextIO] = None,
                    out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Prompt for formulas until end of input."""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    print(settings.prompt, end="", file=out, flush=True)
    for line in stdin:
        evaluate(line.rstrip("\r\n"), table, settings.decimals, out, err)
        print(settings.prompt, end="", file=out, flush=True)
    print(file=out)
    return 0


def run_batch(formulas: Iterable[str], table: ElementTable, settings: Settings,
              out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Evaluate each formula in order. Returns 1 if any of them failed."""
    results = [evaluate(formula, table, settings.decimals, out, err) for formula in formulas]
    return 0 if all(results) else 1


def _resolve_settings(args: argparse.Namespace) -> Settings:
    settings = load_settings(args.config)
    overrides = {}
    if args.weightsfile is not None:
        overrides["element_file"] = Path(args.weightsfile)
    if args.decimals is not None:
        if args.decimals < 0:
            raise SettingsError("--decimals must be zero or a positive integer")
        overrides["decimals"] = args.decimals
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return replace(settings, **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = _resolve_settings(args)
    except (SettingsError, FileNotFoundError) as e:
        print(str(e), file=sys.stderr)
        return 1
    setup_logging(settings.log_level)

    try:
        table = load_element_table(settings.element_file)
    except (ElementFileError, EmptyTableError) as e:
        print(str(e), file=sys.stderr)
        return 1

    if args.formulas:
        return run_batch(args.formulas, table, settings)
    return run_interactive(table, settings)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

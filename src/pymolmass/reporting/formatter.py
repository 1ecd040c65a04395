"""Rendering of compound results as user-facing sentences."""

import logging
from typing import Iterable

from pymolmass.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


def format_element_names(names: Iterable[str]) -> str:
    """
    Sort element names and render them as a sentence.

    One name gives "The element is X", two give "The elements are X and Y",
    more give "The elements are X, Y and Z".
    Raises:
        ValueError: If *names* is empty.
    """
    ordered = sorted(set(names))
    if not ordered:
        raise ValueError("Cannot format an empty list of element names")
    if len(ordered) == 1:
        return f"The element is {ordered[0]}"
    leading = ", ".join(ordered[:-1])
    return f"The elements are {leading} and {ordered[-1]}"


def format_weight(formula: str, total_weight: float,
                  decimals: int = ProcessingConstants.DEFAULT_DECIMALS) -> str:
    """Render the molar mass line for *formula*."""
    if decimals < 0:
        raise ValueError(f"Decimal places must be non-negative, got {decimals}")
    return f"The atomic weight of {formula} is {total_weight:.{decimals}f}"

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from pymolmass.core.elements import ElementTable
from pymolmass.core.exceptions import EmptyFormulaError, InvalidQuantityError, UnknownSymbolError
from pymolmass.core.ordered_set import OrderedSet
from pymolmass.parsing.tokenizer import FormulaToken

logger = logging.getLogger(__name__)


@dataclass
class CompoundResult:
    total_weight: float
    element_names: OrderedSet = field(default_factory=OrderedSet)

    def sorted_names(self) -> List[str]:
        """Element names in ascending codepoint order."""
        return self.element_names.sorted()


def compute(tokens: Sequence[FormulaToken], table: ElementTable, formula: Optional[str] = None) -> CompoundResult:
    """
    Resolve every token against the element table and sum the weights.
    Args:
        tokens: Tokens produced by the formula tokenizer.
        table: Element table used for symbol lookup.
        formula: Original input text, echoed back in errors.
    Returns:
        CompoundResult with the total weight and the distinct element names in discovery order.
    Raises:
        EmptyFormulaError: If there are no tokens.
        UnknownSymbolError: On the first token whose symbol is not in the table.
        InvalidQuantityError: If a token carries a count of zero.
    """
    if formula is None:
        formula = "".join(f"{t.symbol}{t.quantity}" for t in tokens)
    if not tokens:
        raise EmptyFormulaError(formula)
    total = 0.0
    names: OrderedSet = OrderedSet()
    for token in tokens:
        element = table.lookup(token.symbol)
        if element is None:
            raise UnknownSymbolError(token.symbol, formula)
        if token.quantity < 1:
            raise InvalidQuantityError(token.symbol, token.quantity, formula)
        total += token.quantity * element.weight
        if names.add(element.name):
            logger.debug("Collected element %s from symbol %s", element.name, token.symbol)
    logger.debug("Computed weight %.6f for '%s' with %d distinct elements", total, formula, len(names))
    return CompoundResult(total_weight=total, element_names=names)

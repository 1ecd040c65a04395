"""Formula tokenizer: turns free-form formula text into (symbol, quantity) tokens."""

import logging
import string
from dataclasses import dataclass
from typing import Iterator, List, Optional

logger = logging.getLogger(__name__)

_UPPER = frozenset(string.ascii_uppercase)
_LOWER = frozenset(string.ascii_lowercase)
_DIGITS = frozenset(string.digits)


@dataclass(frozen=True)
class FormulaToken:
    symbol: str
    quantity: int = 1


class FormulaTokenizer:
    """
    Cursor-based scanner over a formula string.

    Characters that cannot start a symbol (anything other than an ASCII
    uppercase letter) are skipped. A symbol is one uppercase letter, optionally
    followed by one lowercase letter, optionally followed by a run of digits
    giving the atom count. Symbols are not checked against any element table.
    """

    def __init__(self, formula: str) -> None:
        self.formula = formula
        self.position = 0

    def __iter__(self) -> Iterator[FormulaToken]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def next_token(self) -> Optional[FormulaToken]:
        """Return the next token, or None once the input is exhausted."""
        if not self._skip_to_symbol():
            return None
        symbol = self._read_symbol()
        quantity = self._read_quantity()
        token = FormulaToken(symbol=symbol, quantity=1 if quantity is None else quantity)
        logger.debug("Token %s x%d ending at position %d", token.symbol, token.quantity, self.position)
        return token

    def _peek(self) -> Optional[str]:
        if self.position < len(self.formula):
            return self.formula[self.position]
        return None

    def _skip_to_symbol(self) -> bool:
        while self.position < len(self.formula):
            if self.formula[self.position] in _UPPER:
                return True
            self.position += 1
        return False

    def _read_symbol(self) -> str:
        start = self.position
        self.position += 1
        if self._peek() in _LOWER:
            self.position += 1
        return self.formula[start:self.position]

    def _read_quantity(self) -> Optional[int]:
        start = self.position
        while self._peek() in _DIGITS:
            self.position += 1
        if self.position == start:
            return None
        return int(self.formula[start:self.position])


def tokenize(formula: str) -> List[FormulaToken]:
    """Tokenize *formula* into an ordered list of FormulaToken."""
    tokens = list(FormulaTokenizer(formula))
    logger.debug("Tokenized '%s' into %d tokens", formula, len(tokens))
    return tokens

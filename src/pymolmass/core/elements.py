import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from pymolmass.core.exceptions import EmptyTableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Element:
    symbol: str
    name: str
    weight: float


class ElementTable:
    """Read-only registry of elements keyed by their case-sensitive symbol."""

    def __init__(self, elements: Dict[str, Element]) -> None:
        self._elements = dict(elements)

    @classmethod
    def build(cls, records: Iterable[Tuple[str, str, float]]) -> "ElementTable":
        """
        Build a table from (symbol, name, weight) records.
        Args:
            records: Iterable of (symbol, name, weight) triples, in load order.
        Returns:
            ElementTable containing one element per distinct symbol.
        Raises:
            EmptyTableError: If no records are supplied.
        """
        elements: Dict[str, Element] = {}
        count = 0
        for symbol, name, weight in records:
            count += 1
            if symbol in elements:
                logger.warning("Duplicate symbol '%s' (%s) ignored, keeping %s",
                               symbol, name, elements[symbol].name)
                continue
            elements[symbol] = Element(symbol=symbol, name=name, weight=float(weight))
        if count == 0:
            raise EmptyTableError()
        logger.info("Built element table with %d elements from %d records", len(elements), count)
        return cls(elements)

    def lookup(self, symbol: str) -> Optional[Element]:
        """Return the element with exactly this symbol, or None."""
        element = self._elements.get(symbol)
        if element is None:
            logger.debug("Symbol not found in element table: %s", symbol)
        return element

    @property
    def symbols(self) -> List[str]:
        return list(self._elements)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._elements

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements.values())

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"ElementTable({len(self._elements)} elements)"

import logging
from typing import Dict, Generic, Hashable, Iterable, Iterator, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


class OrderedSet(Generic[T]):
    """Insertion-ordered set: the first occurrence of an item wins, later additions are no-ops."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: Dict[T, None] = {}
        if items is not None:
            for item in items:
                self.add(item)

    def add(self, item: T) -> bool:
        """Add *item* if absent. Returns True only when the item was newly inserted."""
        if item in self._items:
            logger.debug("Item already present, ignoring: %s", item)
            return False
        self._items[item] = None
        return True

    def sorted(self) -> List[T]:
        """Return the items in ascending order."""
        return sorted(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedSet):
            return list(self._items) == list(other._items)
        if isinstance(other, (set, frozenset)):
            return set(self._items) == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"OrderedSet({list(self._items)!r})"

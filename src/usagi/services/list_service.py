"""In-memory shopping list store."""
from typing import Iterator, List, Optional

from usagi.domain.errors import InvalidArgumentError, InvalidIndexError
from usagi.domain.types import ItemText, ListEntry
from .base_service import BaseService, Result


EMPTY_LIST_MESSAGE = "(shopping list is empty)"
LIST_HEADER = "Your shopping list:"


class ShoppingList(BaseService):
    """Ordered, mutable sequence of shopping list items.

    Items keep their insertion order; removal shifts later items down by one.
    Positions exposed to callers are 1-based.
    """

    def __init__(self, items: Optional[List[str]] = None):
        super().__init__()
        self._items: List[ItemText] = []
        for text in items or []:
            self.add(text)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ListEntry]:
        return self.entries()

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def items(self) -> List[str]:
        """Copy of the current items as plain strings."""
        return [str(item) for item in self._items]

    def add(self, text: str) -> Result[ItemText]:
        """
        Append an item to the end of the list.

        Text that is empty after trimming is ignored; the result is still
        successful but carries no data. Text spanning several lines is
        rejected with an INVALID_ARGUMENT failure.

        Args:
            text: Raw item text

        Returns:
            Result containing the stored item, no data if ignored, or a
            failure for multi-line text
        """
        stripped = (text or "").strip()
        if not stripped:
            self.logger.debug("Ignoring empty item")
            return Result.ok(None, ignored=True)

        if "\n" in stripped or "\r" in stripped:
            error = InvalidArgumentError(
                "Item must be a single line",
                suggestions=["Add one item per line"],
                metadata={"length": len(text)}
            )
            self._log_failure("add_item", error)
            return Result.from_error(error)

        item = ItemText(stripped)
        self._items.append(item)
        self._log_action("add_item", item=str(item), count=self.count)
        return Result.ok(item)

    def remove(self, position: int) -> Result[ItemText]:
        """
        Remove the item at a 1-based position.

        Args:
            position: Position as shown to the user

        Returns:
            Result containing the removed item, or an INVALID_INDEX failure
            leaving the list untouched
        """
        if position < 1 or position > self.count:
            error = InvalidIndexError(
                "Invalid index",
                suggestions=[f"Use a number between 1 and {self.count}"] if self.count else [],
                metadata={"position": position, "count": self.count}
            )
            self._log_failure("remove_item", error)
            return Result.from_error(error)

        removed = self._items.pop(position - 1)
        self._log_action("remove_item", position=position, item=str(removed), count=self.count)
        return Result.ok(removed)

    def clear(self) -> Result[int]:
        """
        Remove all items.

        Returns:
            Result containing the number of items removed
        """
        removed = self.count
        self._items.clear()
        self._log_action("clear_list", removed=removed)
        return Result.ok(removed)

    def entries(self) -> Iterator[ListEntry]:
        """Yield (position, text) entries in current order.

        Each call starts a fresh pass over the list.
        """
        for position, item in enumerate(self._items, start=1):
            yield ListEntry(position=position, text=item)

    def render(self) -> List[str]:
        """Render the list as display lines, or the empty placeholder."""
        if self.is_empty:
            return [EMPTY_LIST_MESSAGE]
        return [LIST_HEADER] + [entry.render() for entry in self.entries()]

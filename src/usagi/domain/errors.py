"""Error types for shopping list operations."""
from typing import Optional, List, Dict, Any


class ShoppingListError(Exception):
    """Base class for recoverable shopping list errors."""

    code = "ERROR"

    def __init__(
        self,
        message: str,
        suggestions: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.suggestions = suggestions or []
        self.metadata = metadata or {}
        super().__init__(message)


class InvalidIndexError(ShoppingListError):
    """Position is outside the current list."""
    code = "INVALID_INDEX"


class InvalidArgumentError(ShoppingListError):
    """Command argument is missing or malformed."""
    code = "INVALID_ARGUMENT"


class StorageError(ShoppingListError):
    """List file could not be opened, read or written."""
    code = "STORAGE_ERROR"

"""Base service class with common functionality."""
from typing import TypeVar, Generic, Optional, List

from pydantic import BaseModel, ConfigDict

from usagi.domain.errors import ShoppingListError
from usagi.utils.logger import get_logger

# Generic type for service results
T = TypeVar('T')


class Result(BaseModel, Generic[T]):
    """Generic result type for service operations."""
    success: bool
    data: Optional[T] = None
    error: str = ""
    code: str = ""
    suggestions: List[str] = []
    metadata: dict = {}

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @classmethod
    def ok(cls, data: Optional[T] = None, **metadata) -> 'Result[T]':
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def fail(
        cls,
        error: str,
        suggestions: Optional[List[str]] = None,
        code: str = "ERROR"
    ) -> 'Result[T]':
        """Create a failed result."""
        return cls(
            success=False,
            error=error or "Unknown error",
            code=code,
            suggestions=suggestions or []
        )

    @classmethod
    def from_error(cls, error: ShoppingListError) -> 'Result[T]':
        """Create a failed result from a ShoppingListError."""
        return cls(
            success=False,
            error=error.message,
            code=error.code,
            suggestions=error.suggestions,
            metadata=error.metadata
        )


class BaseService:
    """Base class for all services."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    def _log_action(
        self,
        action: str,
        status: str = "success",
        **kwargs
    ) -> None:
        """
        Log a service action.

        Args:
            action: Name of the action
            status: Status of the action
            **kwargs: Additional log data
        """
        self.logger.info(f"{action}: {status}", **kwargs)

    def _log_failure(self, action: str, error: ShoppingListError) -> None:
        """Log a recoverable failure of an action."""
        self.logger.warning(
            f"{action}: failed",
            code=error.code,
            error=error.message,
            **error.metadata
        )

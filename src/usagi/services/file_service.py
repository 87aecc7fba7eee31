"""Plain-text persistence for shopping lists.

The file format is one item per line with no header or escaping. Saving
overwrites the target; loading appends to the list in memory.
"""
from pathlib import Path
from typing import List, Optional, Union

from usagi.config.settings import get_settings
from usagi.domain.errors import StorageError
from .base_service import BaseService, Result
from .list_service import ShoppingList


PathLike = Union[str, Path]


class FileService(BaseService):
    """Saves and loads shopping lists to and from text files."""

    def __init__(self, encoding: Optional[str] = None):
        super().__init__()
        self.encoding = encoding or get_settings().FILE_ENCODING

    def save(self, shopping_list: ShoppingList, filename: PathLike) -> Result[int]:
        """
        Write every item as one line, replacing the file's contents.

        Args:
            shopping_list: List to save
            filename: Target file

        Returns:
            Result containing the number of items saved
        """
        items = shopping_list.items
        try:
            # Encode before opening so a failure never truncates the target
            data = "".join(f"{item}\n" for item in items).encode(self.encoding)
        except UnicodeEncodeError as e:
            error = StorageError(
                f"Cannot encode list as {self.encoding}: {e.reason}",
                suggestions=["Set USAGI_FILE_ENCODING to utf-8"],
                metadata={"filename": str(filename)}
            )
            self._log_failure("save_list", error)
            return Result.from_error(error)

        try:
            with open(filename, "wb") as f:
                f.write(data)
        except OSError as e:
            error = self._storage_error(e, filename)
            self._log_failure("save_list", error)
            return Result.from_error(error)
        except Exception:
            self.logger.exception("Failed to save list", filename=str(filename))
            return Result.fail("Failed to save list", code=StorageError.code)

        self._log_action("save_list", filename=str(filename), saved=len(items))
        return Result.ok(len(items), filename=str(filename))

    def load(self, shopping_list: ShoppingList, filename: PathLike) -> Result[int]:
        """
        Append every non-empty trimmed line of a file to the list.

        The whole file is read before the list is touched, so a failure
        leaves the list unchanged.

        Args:
            shopping_list: List to append to
            filename: Source file

        Returns:
            Result containing the list's new total count
        """
        try:
            lines = self._read_lines(filename)
        except (OSError, UnicodeError) as e:
            error = self._storage_error(e, filename)
            self._log_failure("load_list", error)
            return Result.from_error(error)
        except Exception:
            self.logger.exception("Failed to load list", filename=str(filename))
            return Result.fail("Failed to load list", code=StorageError.code)

        added = 0
        for line in lines:
            if shopping_list.add(line).data is not None:
                added += 1

        self._log_action(
            "load_list",
            filename=str(filename),
            added=added,
            total=shopping_list.count
        )
        return Result.ok(shopping_list.count, filename=str(filename), added=added)

    def _read_lines(self, filename: PathLike) -> List[str]:
        with open(filename, "r", encoding=self.encoding) as f:
            return [line.strip() for line in f if line.strip()]

    def _storage_error(self, e: Exception, filename: PathLike) -> StorageError:
        reason = getattr(e, "strerror", None) or str(e)
        return StorageError(
            f"Failed to open file: {reason}",
            metadata={"filename": str(filename)}
        )

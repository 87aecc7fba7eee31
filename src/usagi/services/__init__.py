"""Services package for Usagi."""
from .base_service import Result
from .list_service import ShoppingList
from .file_service import FileService

__all__ = ['Result', 'ShoppingList', 'FileService']

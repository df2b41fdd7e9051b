"""Manager classes for table state."""

from .pagination_manager import PaginationManager
from .selection_manager import SelectionManager, SelectionMark
from .table_controller import TableController

__all__ = [
    "PaginationManager",
    "SelectionManager",
    "SelectionMark",
    "TableController",
]

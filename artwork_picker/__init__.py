"""artwork-picker: page-independent row selection over a server-paginated collection."""

__version__ = "1.0.0"

from .domain import (
    BulkSelectInProgress,
    BulkSelectResult,
    Page,
    PickerError,
    Record,
    SourceUnavailable,
)
from .managers import PaginationManager, SelectionManager, SelectionMark, TableController

__all__ = [
    "__version__",
    "BulkSelectInProgress",
    "BulkSelectResult",
    "Page",
    "PaginationManager",
    "PickerError",
    "Record",
    "SelectionManager",
    "SelectionMark",
    "SourceUnavailable",
    "TableController",
]

"""Domain models and errors."""

from .errors import BulkSelectInProgress, PickerError, SourceUnavailable
from .records import BulkSelectResult, Page, Record

__all__ = [
    "BulkSelectInProgress",
    "BulkSelectResult",
    "Page",
    "PickerError",
    "Record",
    "SourceUnavailable",
]

"""Exceptions raised by the artwork picker."""

from typing import Optional


class PickerError(Exception):
    """Base class for artwork picker errors."""


class SourceUnavailable(PickerError):
    """A page could not be fetched from the remote collection."""

    def __init__(self, message: str, page_number: Optional[int] = None):
        super().__init__(message)
        self.page_number = page_number

    def __str__(self) -> str:
        message = super().__str__()
        if self.page_number is None:
            return message
        return f"{message} (page {self.page_number})"


class BulkSelectInProgress(PickerError):
    """A bulk select was requested while another one is still scanning."""

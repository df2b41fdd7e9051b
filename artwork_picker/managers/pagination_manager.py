"""Pagination state management for a numbered, server-paginated table."""

import math


class PaginationManager:
    def __init__(self, page_size: int = 12):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.page_size = page_size
        self.page = 1
        self.total_count = 0
        self.loading = False

    @property
    def first(self) -> int:
        """0-based offset of the first row on the current page."""
        return (self.page - 1) * self.page_size

    @property
    def page_count(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    def from_widget_index(self, index: int) -> int:
        """Convert the table widget's 0-based page index to a page number."""
        return max(index, 0) + 1

    def start_loading(self) -> None:
        self.loading = True

    def finish_loading(self, page: int, total_count: int) -> None:
        self.loading = False
        self.page = page
        self.total_count = total_count

    def fail_loading(self) -> None:
        self.loading = False

    def reset(self) -> None:
        self.page = 1
        self.total_count = 0
        self.loading = False

"""Table controller - Drives page loads and selection for the table view."""

import logging
from typing import Iterable, List, Optional

from artwork_picker.core.protocols import PageSourcePort
from artwork_picker.domain import BulkSelectResult, Record, SourceUnavailable

from .pagination_manager import PaginationManager
from .selection_manager import SelectionManager

logger = logging.getLogger("ArtworkPicker.TableController")


class TableController:
    """Connects the page source, pagination state and selection state.

    The presentation layer renders ``records`` and ``visible_selection()``
    and forwards widget events to the ``on_*`` methods.
    """

    def __init__(
        self,
        source: PageSourcePort,
        selection: SelectionManager,
        pagination: PaginationManager,
    ):
        """Initialize TableController.

        Args:
            source: Page source used for table pages
            selection: Selection state shared with bulk select
            pagination: Pagination state for the table
        """
        if selection.page_size != pagination.page_size:
            raise ValueError(
                f"Page size mismatch: selection uses {selection.page_size}, "
                f"pagination uses {pagination.page_size}"
            )
        self.source = source
        self.selection = selection
        self.pagination = pagination
        self.records: List[Record] = []

    @property
    def max_selectable(self) -> int:
        """Upper bound for the bulk select input."""
        return self.pagination.total_count

    async def load_page(self, page_number: int) -> bool:
        """Fetch and display a page.

        Returns:
            True if the page was loaded, False if the fetch failed and the
            previous page is still displayed
        """
        self.pagination.start_loading()
        try:
            page = await self.source.fetch_page(page_number, self.pagination.page_size)
        except SourceUnavailable as e:
            logger.error(f"Error fetching page {page_number}: {e}")
            self.pagination.fail_loading()
            return False

        self.records = list(page.records)
        self.pagination.finish_loading(page_number, page.total_count)
        self.selection.on_page_loaded(page)
        logger.info(
            f"Loaded page {page_number} ({len(page)} rows, {page.total_count} total)"
        )
        return True

    async def on_page_change(self, widget_page_index: int) -> bool:
        return await self.load_page(self.pagination.from_widget_index(widget_page_index))

    def on_selection_change(self, rows: Iterable[Record]) -> None:
        self.selection.on_selection_toggled(row.id for row in rows)

    def visible_selection(self) -> List[Record]:
        return self.selection.selected_on_page()

    async def submit_bulk_select(self, n: Optional[int]) -> BulkSelectResult:
        """Run a bulk select and refresh the current page afterwards.

        The refresh also runs when the scan fails, so partially selected
        rows on the visible page show up. The scan's error is re-raised.
        """
        if n is None or n < 1:
            return await self.selection.request_bulk_select(n)
        try:
            result = await self.selection.request_bulk_select(n)
        finally:
            await self.load_page(self.pagination.page)
        if result.shortfall:
            logger.info(f"Bulk select fell short by {result.shortfall} rows")
        return result

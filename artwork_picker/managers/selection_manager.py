"""Selection manager - Page-independent row selection over a paginated source."""

import enum
import logging
from typing import Dict, FrozenSet, Iterable, List, Optional

from artwork_picker.core.protocols import PageSourcePort
from artwork_picker.domain import (
    BulkSelectInProgress,
    BulkSelectResult,
    Page,
    Record,
    SourceUnavailable,
)

logger = logging.getLogger("ArtworkPicker.SelectionManager")


class SelectionMark(enum.Enum):
    SELECTED = "selected"
    DESELECTED = "deselected"


class SelectionManager:
    """Owns the global selection state for one browsing session.

    Every id the user (or a bulk select) has decided on carries exactly
    one mark, so the selected and deselected sets can never overlap.
    Ids without a mark were never decided and render as unselected.
    Marks are never pruned for the lifetime of the manager.
    """

    def __init__(self, source: PageSourcePort, page_size: int):
        """Initialize SelectionManager.

        Args:
            source: Page source scanned by bulk select
            page_size: Rows per page, must match the presentation layer
        """
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.source = source
        self.page_size = page_size

        self._marks: Dict[int, SelectionMark] = {}
        self._current_page: Optional[Page] = None
        self._bulk_running = False
        self._cancel_requested = False

    # --- state -----------------------------------------------------------

    def _mark(self, record_id: int, mark: SelectionMark) -> None:
        self._marks[record_id] = mark

    def _ids_with(self, mark: SelectionMark) -> FrozenSet[int]:
        return frozenset(i for i, m in self._marks.items() if m is mark)

    @property
    def selected_ids(self) -> FrozenSet[int]:
        return self._ids_with(SelectionMark.SELECTED)

    @property
    def deselected_ids(self) -> FrozenSet[int]:
        return self._ids_with(SelectionMark.DESELECTED)

    @property
    def selected_count(self) -> int:
        return sum(1 for m in self._marks.values() if m is SelectionMark.SELECTED)

    @property
    def current_page(self) -> Optional[Page]:
        return self._current_page

    @property
    def bulk_select_running(self) -> bool:
        return self._bulk_running

    def mark_of(self, record_id: int) -> Optional[SelectionMark]:
        return self._marks.get(record_id)

    def is_selected(self, record_id: int) -> bool:
        return self._marks.get(record_id) is SelectionMark.SELECTED

    def get_total_count(self) -> int:
        if self._current_page is None:
            return 0
        return self._current_page.total_count

    def selected_on_page(self) -> List[Record]:
        """Records of the loaded page that render as selected, in page order."""
        if self._current_page is None:
            return []
        return [r for r in self._current_page.records if self.is_selected(r.id)]

    # --- events ----------------------------------------------------------

    def on_page_loaded(self, page: Page) -> None:
        """Remember which records the next toggle event refers to."""
        self._current_page = page

    def on_selection_toggled(self, visible_selected_ids: Iterable[int]) -> None:
        """Reconcile the widget's selection for the visible page.

        Every record on the page ends up marked: selected if its id was
        reported, deselected otherwise, including rows the user never
        touched. Ids on other pages keep their marks.
        """
        page = self._current_page
        if page is None or page.is_empty:
            return

        reported = set(visible_selected_ids)
        newly_selected_on_page = {r.id for r in page.records if r.id in reported}

        for record in page.records:
            if record.id in newly_selected_on_page:
                self._mark(record.id, SelectionMark.SELECTED)
            else:
                self._mark(record.id, SelectionMark.DESELECTED)

        logger.debug(
            f"Page {page.page_number}: {len(newly_selected_on_page)} of "
            f"{len(page)} rows selected"
        )

    # --- bulk select -----------------------------------------------------

    def cancel_bulk_select(self) -> None:
        """Ask a running bulk select to stop before its next page fetch."""
        if self._bulk_running:
            self._cancel_requested = True

    async def request_bulk_select(self, n: Optional[int]) -> BulkSelectResult:
        """Grow the selection to ``n`` ids, scanning from the first page.

        Deselected ids are skipped. Pages are fetched one at a time and
        the scan stops once ``n`` ids are selected or the source runs
        out of records.

        Args:
            n: Target number of selected ids

        Returns:
            BulkSelectResult describing the scan

        Raises:
            SourceUnavailable: If a page fetch fails. Ids gathered from
                earlier pages stay selected.
            BulkSelectInProgress: If another bulk select is running
        """
        if n is None or n < 1:
            return BulkSelectResult(requested=n or 0, selected_count=self.selected_count)
        if self._bulk_running:
            raise BulkSelectInProgress("A bulk select is already running")

        self._bulk_running = True
        self._cancel_requested = False
        deselected = self.deselected_ids
        selected = set(self.selected_ids)
        before = len(selected)
        page_number = 1
        pages_scanned = 0
        exhausted = False
        cancelled = False

        logger.info(f"Bulk select of {n} started with {before} already selected")
        try:
            while len(selected) < n:
                if self._cancel_requested:
                    cancelled = True
                    logger.warning(f"Bulk select cancelled before page {page_number}")
                    break

                page = await self.source.fetch_page(page_number, self.page_size)
                if page.is_empty:
                    exhausted = True
                    break

                remaining = n - len(selected)
                take = min(remaining, len(page))
                for record in page.records[:take]:
                    if record.id not in deselected:
                        selected.add(record.id)

                pages_scanned += 1
                logger.debug(
                    f"Bulk select page {page_number}: {len(selected)}/{n} selected"
                )
                page_number += 1
        except SourceUnavailable as e:
            logger.error(f"Bulk select stopped at page {page_number}: {e}")
            raise
        finally:
            for record_id in selected:
                self._mark(record_id, SelectionMark.SELECTED)
            self._bulk_running = False
            self._cancel_requested = False

        result = BulkSelectResult(
            requested=n,
            added=len(selected) - before,
            selected_count=len(selected),
            pages_scanned=pages_scanned,
            exhausted=exhausted,
            cancelled=cancelled,
        )
        logger.info(
            f"Bulk select finished: {result.selected_count}/{n} selected "
            f"after {pages_scanned} pages"
        )
        return result

    def __repr__(self) -> str:
        return (
            f"SelectionManager(selected={self.selected_count}, "
            f"deselected={len(self.deselected_ids)})"
        )

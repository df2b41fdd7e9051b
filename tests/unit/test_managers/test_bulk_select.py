"""Tests for SelectionManager bulk select."""

import asyncio

import pytest

from artwork_picker.domain import BulkSelectInProgress, SourceUnavailable
from artwork_picker.managers import SelectionManager
from tests.conftest import make_page
from tests.fakes import FakePageSource


class TestBulkSelect:
    """Bulk "select first N" scanning."""

    def test_selects_first_n_records(self, manager: SelectionManager, source: FakePageSource):
        result = asyncio.run(manager.request_bulk_select(5))

        assert manager.selected_ids == {1, 2, 3, 4, 5}
        assert source.requested_pages == [1, 2]
        assert result.selected_count == 5
        assert result.added == 5
        assert result.pages_scanned == 2
        assert result.shortfall == 0

    def test_fetches_with_configured_page_size(self, manager: SelectionManager, source: FakePageSource):
        asyncio.run(manager.request_bulk_select(4))

        assert {size for _, size in source.requests} == {3}

    def test_skips_deselected_ids(self, manager: SelectionManager):
        manager.on_page_loaded(make_page([1, 2, 3]))
        manager.on_selection_toggled({1, 3})
        manager.on_page_loaded(make_page([4, 5, 6], page_number=2))
        manager.on_selection_toggled(set())

        result = asyncio.run(manager.request_bulk_select(5))

        assert manager.selected_ids == {1, 3, 7, 8, 9}
        assert manager.deselected_ids == {2, 4, 5, 6}
        assert result.added == 3
        assert result.pages_scanned == 3

    def test_deselected_id_stays_unselected_for_any_n(self, manager: SelectionManager):
        manager.on_page_loaded(make_page([1, 2, 3]))
        manager.on_selection_toggled({1, 3})

        asyncio.run(manager.request_bulk_select(30))

        assert 2 not in manager.selected_ids
        assert 2 in manager.deselected_ids

    def test_reselected_id_can_be_kept_by_bulk_select(self, manager: SelectionManager):
        manager.on_page_loaded(make_page([1, 2, 3]))
        manager.on_selection_toggled(set())
        manager.on_selection_toggled({2})

        asyncio.run(manager.request_bulk_select(3))

        assert 2 in manager.selected_ids

    def test_existing_selection_counts_towards_n(self, manager: SelectionManager, source: FakePageSource):
        manager.on_page_loaded(make_page([10, 11, 12], page_number=4, total_count=30))
        manager.on_selection_toggled({10, 11, 12})

        result = asyncio.run(manager.request_bulk_select(4))

        assert manager.selected_ids == {1, 10, 11, 12}
        assert result.added == 1
        assert source.requested_pages == [1]

    def test_already_satisfied_does_not_fetch(self, manager: SelectionManager, source: FakePageSource):
        manager.on_page_loaded(make_page([1, 2, 3]))
        manager.on_selection_toggled({1, 2, 3})

        result = asyncio.run(manager.request_bulk_select(2))

        assert source.requests == []
        assert result.added == 0
        assert manager.selected_ids == {1, 2, 3}

    def test_never_overshoots(self):
        for n in (1, 2, 4, 7, 13):
            fresh = SelectionManager(FakePageSource(list(range(1, 31))), page_size=3)
            asyncio.run(fresh.request_bulk_select(n))
            assert len(fresh.selected_ids) == n

    def test_n_larger_than_collection_exhausts_source(self):
        source = FakePageSource([1, 2, 3, 4, 5, 6, 7])
        manager = SelectionManager(source, page_size=3)

        result = asyncio.run(manager.request_bulk_select(50))

        assert manager.selected_ids == {1, 2, 3, 4, 5, 6, 7}
        assert result.exhausted is True
        assert result.shortfall == 43
        assert source.requested_pages == [1, 2, 3, 4]

    def test_exhausted_with_deselections(self):
        source = FakePageSource([1, 2, 3, 4])
        manager = SelectionManager(source, page_size=2)
        manager.on_page_loaded(make_page([1, 2], total_count=4))
        manager.on_selection_toggled({2})

        asyncio.run(manager.request_bulk_select(4))

        assert manager.selected_ids == {2, 3, 4}
        assert manager.deselected_ids == {1}

    @pytest.mark.parametrize("n", [None, 0, -3])
    def test_invalid_n_is_noop(self, manager: SelectionManager, source: FakePageSource, n):
        result = asyncio.run(manager.request_bulk_select(n))

        assert source.requests == []
        assert manager.selected_ids == frozenset()
        assert result.added == 0


class TestBulkSelectFailures:
    """Partial progress and cancellation."""

    def test_failure_keeps_earlier_pages(self, manager: SelectionManager, source: FakePageSource):
        source.fail_on_page = 2

        with pytest.raises(SourceUnavailable) as exc_info:
            asyncio.run(manager.request_bulk_select(8))

        assert exc_info.value.page_number == 2
        assert manager.selected_ids == {1, 2, 3}
        assert manager.bulk_select_running is False

    def test_failure_matches_scan_through_previous_page(self, source: FakePageSource):
        failing = SelectionManager(source, page_size=3)
        source.fail_on_page = 3
        with pytest.raises(SourceUnavailable):
            asyncio.run(failing.request_bulk_select(9))

        reference = SelectionManager(FakePageSource(list(range(1, 7))), page_size=3)
        asyncio.run(reference.request_bulk_select(9))

        assert failing.selected_ids == reference.selected_ids

    def test_failure_on_first_page_keeps_prior_selection(self, manager: SelectionManager, source: FakePageSource):
        manager.on_page_loaded(make_page([1, 2, 3]))
        manager.on_selection_toggled({2})
        source.fail_on_page = 1

        with pytest.raises(SourceUnavailable):
            asyncio.run(manager.request_bulk_select(5))

        assert manager.selected_ids == {2}
        assert manager.deselected_ids == {1, 3}

    def test_cancel_stops_before_next_fetch(self, manager: SelectionManager, source: FakePageSource):
        def cancel_after_second(page_number):
            if page_number == 2:
                manager.cancel_bulk_select()

        source.on_fetch = cancel_after_second

        result = asyncio.run(manager.request_bulk_select(20))

        assert result.cancelled is True
        assert source.requested_pages == [1, 2]
        assert manager.selected_ids == {1, 2, 3, 4, 5, 6}
        assert manager.bulk_select_running is False

    def test_cancel_when_idle_is_ignored(self, manager: SelectionManager):
        manager.cancel_bulk_select()

        result = asyncio.run(manager.request_bulk_select(2))

        assert result.cancelled is False
        assert manager.selected_ids == {1, 2}

    def test_overlapping_bulk_select_is_rejected(self, manager: SelectionManager):
        async def run_both():
            first = asyncio.ensure_future(manager.request_bulk_select(6))
            await asyncio.sleep(0)
            with pytest.raises(BulkSelectInProgress):
                await manager.request_bulk_select(3)
            return await first

        class SlowSource:
            def __init__(self, inner):
                self.inner = inner

            async def fetch_page(self, page_number, page_size):
                await asyncio.sleep(0.01)
                return await self.inner.fetch_page(page_number, page_size)

        manager.source = SlowSource(manager.source)
        result = asyncio.run(run_both())

        assert result.selected_count == 6

"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from artwork_picker.domain import Page, Record
from artwork_picker.managers import PaginationManager, SelectionManager, TableController
from tests.fakes import FakePageSource


def make_page(ids, page_number=1, total_count=None) -> Page:
    records = [Record(id=i) for i in ids]
    return Page.of(records, total_count if total_count is not None else len(ids), page_number)


@pytest.fixture
def source() -> FakePageSource:
    """Collection of ids 1..30."""
    return FakePageSource(list(range(1, 31)))


@pytest.fixture
def manager(source: FakePageSource) -> SelectionManager:
    return SelectionManager(source, page_size=3)


@pytest.fixture
def controller(source: FakePageSource, manager: SelectionManager) -> TableController:
    return TableController(source, manager, PaginationManager(page_size=3))


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"

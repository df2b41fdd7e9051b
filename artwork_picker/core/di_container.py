"""Dependency injection container."""

from dataclasses import dataclass, field
from typing import Optional

from artwork_picker.config import Settings, get_settings
from artwork_picker.core.protocols import PageSourcePort
from artwork_picker.managers import PaginationManager, SelectionManager, TableController
from artwork_picker.services import build_page_source


@dataclass
class AppContainer:
    settings: Settings

    _page_source: Optional[PageSourcePort] = field(
        default=None, init=False, repr=False
    )
    _selection_manager: Optional[SelectionManager] = field(
        default=None, init=False, repr=False
    )
    _pagination: Optional[PaginationManager] = field(
        default=None, init=False, repr=False
    )
    _controller: Optional[TableController] = field(
        default=None, init=False, repr=False
    )

    @property
    def page_size(self) -> int:
        return self.settings.display.page_size

    @property
    def page_source(self) -> PageSourcePort:
        if self._page_source is None:
            self._page_source = build_page_source(self.settings)
        return self._page_source

    @property
    def selection_manager(self) -> SelectionManager:
        if self._selection_manager is None:
            self._selection_manager = SelectionManager(self.page_source, self.page_size)
        return self._selection_manager

    @property
    def pagination(self) -> PaginationManager:
        if self._pagination is None:
            self._pagination = PaginationManager(page_size=self.page_size)
        return self._pagination

    @property
    def controller(self) -> TableController:
        if self._controller is None:
            self._controller = TableController(
                self.page_source, self.selection_manager, self.pagination
            )
        return self._controller

    async def aclose(self) -> None:
        if self._page_source is not None:
            await self._page_source.aclose()

    @classmethod
    def create(cls, settings: Optional[Settings] = None) -> "AppContainer":
        return cls(settings=settings or get_settings().settings)

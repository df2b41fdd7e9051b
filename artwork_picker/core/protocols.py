"""Protocol definitions for dependency injection."""

from typing import Protocol

from artwork_picker.domain import Page


class PageSourcePort(Protocol):
    async def fetch_page(self, page_number: int, page_size: int) -> Page: ...

    async def aclose(self) -> None: ...

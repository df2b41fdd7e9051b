from .fake_page_source import FakePageSource

__all__ = ["FakePageSource"]

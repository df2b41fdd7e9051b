"""Page source adapters."""

from artwork_picker.config import Settings

from .http_page_source import HttpPageSource
from .websocket_page_source import WebSocketPageSource


def build_page_source(settings: Settings):
    """Create the page source selected by ``source.kind``."""
    source = settings.source
    if source.kind == "websocket":
        return WebSocketPageSource(
            source.websocket_uri,
            max_size=source.max_message_size,
            timeout=source.timeout,
        )
    return HttpPageSource(
        source.base_url,
        endpoint=source.endpoint,
        fields=source.fields,
        timeout=source.timeout,
    )


__all__ = ["HttpPageSource", "WebSocketPageSource", "build_page_source"]

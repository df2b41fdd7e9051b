"""WebSocket page source speaking the get_history offset/limit protocol."""

import json
import logging

import websockets

from artwork_picker.domain import Page, Record, SourceUnavailable

logger = logging.getLogger("ArtworkPicker.WebSocketPageSource")


class WebSocketPageSource:
    """Requests pages from a history server over a short-lived connection.

    Request:  {"action": "get_history", "offset", "limit", "sort_order"}
    Response: {"type": "history", "items": [...], "total_count": N}
    """

    def __init__(self, uri: str, max_size: int = 5 * 1024 * 1024, timeout: float = 10.0):
        self.uri = uri
        self.max_size = max_size
        self.timeout = timeout

    async def fetch_page(self, page_number: int, page_size: int) -> Page:
        request = {
            "action": "get_history",
            "offset": (page_number - 1) * page_size,
            "limit": page_size,
            "sort_order": "ASC",
        }
        try:
            async with websockets.connect(
                self.uri, max_size=self.max_size, open_timeout=self.timeout
            ) as websocket:
                await websocket.send(json.dumps(request))
                response = await websocket.recv()
        except (OSError, TimeoutError, websockets.exceptions.WebSocketException) as e:
            raise SourceUnavailable(f"WebSocket request to {self.uri} failed: {e}", page_number) from e

        try:
            data = json.loads(response)
        except (TypeError, ValueError) as e:
            raise SourceUnavailable(f"Invalid JSON from {self.uri}", page_number) from e

        if not isinstance(data, dict) or data.get("type") != "history":
            kind = data.get("type") if isinstance(data, dict) else type(data).__name__
            raise SourceUnavailable(f"Unexpected response type: {kind}", page_number)

        try:
            records = [Record.from_payload(item) for item in data.get("items", [])]
            total_count = int(data.get("total_count", 0))
        except (TypeError, ValueError, AttributeError) as e:
            raise SourceUnavailable(f"Malformed history response: {e}", page_number) from e

        logger.debug(f"Fetched page {page_number}: {len(records)} records")
        return Page.of(records, total_count, page_number)

    async def aclose(self) -> None:
        """Connections are per request; nothing to release."""

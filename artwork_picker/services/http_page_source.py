"""HTTP page source for REST collections paginated by page number."""

import logging
from typing import Any, Dict, List, Optional

import httpx

from artwork_picker.domain import Page, Record, SourceUnavailable

logger = logging.getLogger("ArtworkPicker.HttpPageSource")


class HttpPageSource:
    """Fetches pages from an endpoint like ``/api/v1/artworks?page=P&limit=S``.

    The response body must carry the records under ``data`` and the
    collection size under ``pagination.total``.
    """

    def __init__(
        self,
        base_url: str,
        endpoint: str = "artworks",
        fields: Optional[List[str]] = None,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = f"{base_url.rstrip('/')}/{endpoint.strip('/')}"
        self.fields = fields
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def fetch_page(self, page_number: int, page_size: int) -> Page:
        params: Dict[str, Any] = {"page": page_number, "limit": page_size}
        if self.fields:
            params["fields"] = ",".join(self.fields)

        try:
            response = await self._get_client().get(self.url, params=params)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as e:
            raise SourceUnavailable(f"Request to {self.url} failed: {e}", page_number) from e
        except ValueError as e:
            raise SourceUnavailable(f"Invalid JSON from {self.url}", page_number) from e

        return self._parse(body, page_number)

    def _parse(self, body: Any, page_number: int) -> Page:
        try:
            items = body["data"]
            total_count = int(body["pagination"]["total"])
            records = [Record.from_payload(item) for item in items]
        except (KeyError, TypeError, ValueError) as e:
            raise SourceUnavailable(f"Malformed response from {self.url}: {e}", page_number) from e

        logger.debug(f"Fetched page {page_number}: {len(records)} records")
        return Page.of(records, total_count, page_number)

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

from typing import Any

import httpx

from phishlens.client.base import BaseAnalysisClient
from phishlens.client.exceptions import (
    MalformedResponseError,
    ProtocolFailureError,
    TransportFailureError,
)
from phishlens.logging.logger import Log


class HttpClientAdapter(BaseAnalysisClient):
    """Talks to the classification service over HTTP with multipart forms."""

    def __init__(
        self,
        *,
        base_url: str,
        analyze_path: str = "/analyze",
        bulk_analyze_path: str = "/bulk-analyze",
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.strip()
        self._analyze_path = analyze_path
        self._bulk_analyze_path = bulk_analyze_path
        self._timeout = httpx.Timeout(timeout_seconds)
        self._transport = transport

    async def analyze_url(self, url: str) -> dict[str, Any]:
        # (None, value) makes httpx send a plain multipart field
        response = await self._post(self._analyze_path, files={"url": (None, url)})
        return self._decode_json(response)

    async def analyze_csv(self, filename: str, content: bytes) -> bytes:
        response = await self._post(
            self._bulk_analyze_path,
            files={"file": (filename, content, "text/csv")},
        )
        return response.content

    async def _post(self, path: str, *, files: dict[str, Any]) -> httpx.Response:
        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(path, files=files)
            except httpx.TransportError as exc:
                raise TransportFailureError(f"Service unreachable: {exc}") from exc
            except httpx.DecodingError as exc:
                raise MalformedResponseError(f"Undecodable response body: {exc}") from exc
        Log.debug(f"POST {path} -> {response.status_code}")
        if not response.is_success:
            raise ProtocolFailureError(response.status_code)
        return response

    @staticmethod
    def _decode_json(response: httpx.Response) -> dict[str, Any]:
        # covers JSONDecodeError, UnicodeDecodeError and the int digit limit
        try:
            parsed = response.json()
        except ValueError as exc:
            raise MalformedResponseError(f"Invalid JSON response: {exc}") from exc
        if not isinstance(parsed, dict):
            raise MalformedResponseError("JSON response must be an object")
        return parsed

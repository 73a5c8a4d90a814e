import asyncio
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from phishlens.client.exceptions import (
    MalformedResponseError,
    ProtocolFailureError,
    TransportFailureError,
)
from phishlens.client.http_client_adapter import HttpClientAdapter

Handler = Callable[[httpx.Request], httpx.Response]


def _make_adapter(handler: Handler) -> HttpClientAdapter:
    return HttpClientAdapter(
        base_url="http://classifier.test",
        transport=httpx.MockTransport(handler),
    )


def _corrupt_gzip(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, content=b"not gzip", headers={"content-encoding": "gzip"})


class TestAnalyzeUrl:
    def test_returns_decoded_json(self, phish_payload: dict[str, Any]) -> None:
        adapter = _make_adapter(lambda request: httpx.Response(200, json=phish_payload))
        data = asyncio.run(adapter.analyze_url("http://example-phish.test"))
        assert data == phish_payload

    def test_posts_multipart_url_field(self, phish_payload: dict[str, Any]) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=phish_payload)

        asyncio.run(_make_adapter(handler).analyze_url("http://example-phish.test"))

        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/analyze"
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'name="url"' in request.content
        assert b"http://example-phish.test" in request.content
        assert b"filename=" not in request.content

    def test_uses_configured_path(self, phish_payload: dict[str, Any]) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(200, json=phish_payload)

        adapter = HttpClientAdapter(
            base_url="http://classifier.test/api",
            analyze_path="/v2/analyze",
            transport=httpx.MockTransport(handler),
        )
        asyncio.run(adapter.analyze_url("u"))
        assert seen == ["/api/v2/analyze"]

    @pytest.mark.parametrize("status", [400, 404, 500, 503])
    def test_non_success_status_raises_protocol_failure(self, status: int) -> None:
        adapter = _make_adapter(lambda request: httpx.Response(status))
        with pytest.raises(ProtocolFailureError) as exc_info:
            asyncio.run(adapter.analyze_url("u"))
        assert exc_info.value.status_code == status

    def test_connection_error_raises_transport_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportFailureError, match="unreachable"):
            asyncio.run(_make_adapter(handler).analyze_url("u"))

    def test_timeout_raises_transport_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(TransportFailureError):
            asyncio.run(_make_adapter(handler).analyze_url("u"))

    def test_invalid_json_raises_malformed(self) -> None:
        adapter = _make_adapter(lambda request: httpx.Response(200, content=b"<html>"))
        with pytest.raises(MalformedResponseError, match="Invalid JSON"):
            asyncio.run(adapter.analyze_url("u"))

    def test_json_array_raises_malformed(self) -> None:
        adapter = _make_adapter(lambda request: httpx.Response(200, json=[1, 2]))
        with pytest.raises(MalformedResponseError, match="must be an object"):
            asyncio.run(adapter.analyze_url("u"))

    def test_corrupt_compressed_body_raises_malformed(self) -> None:
        adapter = _make_adapter(_corrupt_gzip)
        with pytest.raises(MalformedResponseError, match="Undecodable"):
            asyncio.run(adapter.analyze_url("u"))

    def test_oversized_integer_literal_raises_malformed(self) -> None:
        body = b'{"url": "u", "prediction": ' + b"1" * 5000 + b"}"
        adapter = _make_adapter(lambda request: httpx.Response(200, content=body))
        with pytest.raises(MalformedResponseError, match="Invalid JSON"):
            asyncio.run(adapter.analyze_url("u"))


class TestAnalyzeCsv:
    def test_returns_raw_body(self, result_csv_bytes: bytes) -> None:
        adapter = _make_adapter(lambda request: httpx.Response(200, content=result_csv_bytes))
        body = asyncio.run(adapter.analyze_csv("urls.csv", b"url\nhttps://a.test\n"))
        assert body == result_csv_bytes

    def test_posts_file_field(self, sample_csv_bytes: bytes) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=b"url\n")

        asyncio.run(_make_adapter(handler).analyze_csv("urls.csv", sample_csv_bytes))

        request = seen[0]
        assert request.url.path == "/bulk-analyze"
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'name="file"' in request.content
        assert b'filename="urls.csv"' in request.content
        assert sample_csv_bytes in request.content

    def test_binary_body_is_not_decoded(self) -> None:
        payload = b"\xff\xfe\x00binary"
        adapter = _make_adapter(lambda request: httpx.Response(200, content=payload))
        assert asyncio.run(adapter.analyze_csv("a.csv", b"")) == payload

    def test_service_unavailable_raises_protocol_failure(self) -> None:
        adapter = _make_adapter(lambda request: httpx.Response(503))
        with pytest.raises(ProtocolFailureError, match="503"):
            asyncio.run(adapter.analyze_csv("a.csv", b"url\n"))

    def test_corrupt_compressed_body_raises_malformed(self) -> None:
        with pytest.raises(MalformedResponseError):
            asyncio.run(_make_adapter(_corrupt_gzip).analyze_csv("a.csv", b"url\n"))

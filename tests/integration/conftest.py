from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest

from phishlens.client.http_client_adapter import HttpClientAdapter
from phishlens.config.settings import Settings
from phishlens.dashboard.dashboard import Dashboard, build_dashboard

Handler = Callable[[httpx.Request], Any]
DashboardFactory = Callable[[Handler], Dashboard]


@pytest.fixture
def downloads(tmp_path: Path) -> Path:
    return tmp_path / "downloads"


@pytest.fixture
def notifier() -> MagicMock:
    return MagicMock()


@pytest.fixture
def served_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_dashboard(
    downloads: Path,
    notifier: MagicMock,
    served_requests: list[httpx.Request],
) -> DashboardFactory:
    """Build a Dashboard whose HTTP calls are answered by ``handler``."""

    def factory(handler: Handler) -> Dashboard:
        def recording(request: httpx.Request) -> httpx.Response:
            served_requests.append(request)
            return handler(request)

        settings = Settings(service_base_url="http://classifier.test", download_dir=downloads)
        client = HttpClientAdapter(
            base_url=settings.service_base_url,
            transport=httpx.MockTransport(recording),
        )
        return build_dashboard(settings, client=client, notifier=notifier)

    return factory

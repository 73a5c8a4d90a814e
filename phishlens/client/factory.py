from phishlens.client.base import BaseAnalysisClient
from phishlens.client.example_client_adapter import ExampleClientAdapter
from phishlens.client.http_client_adapter import HttpClientAdapter
from phishlens.config.settings import Settings


class ClientFactory:
    """Creates the configured analysis client."""

    PROVIDERS: tuple[str, ...] = ("http", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalysisClient:
        provider = settings.client_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "http":
            base_url = settings.service_base_url.strip()
            if not base_url:
                raise ValueError("service_base_url is required for client_provider=http")
            return HttpClientAdapter(
                base_url=base_url,
                analyze_path=settings.analyze_path,
                bulk_analyze_path=settings.bulk_analyze_path,
                timeout_seconds=settings.request_timeout_seconds,
            )
        raise ValueError(
            f"Unknown client provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )

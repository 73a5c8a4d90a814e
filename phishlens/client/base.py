from abc import ABC, abstractmethod
from typing import Any


class BaseAnalysisClient(ABC):
    """Contract for transports talking to the classification service."""

    @abstractmethod
    async def analyze_url(self, url: str) -> dict[str, Any]:
        """Submit one URL and return the decoded JSON object.

        Raises:
            AnalysisClientError: on transport, protocol or decoding failure.
        """

    @abstractmethod
    async def analyze_csv(self, filename: str, content: bytes) -> bytes:
        """Submit a CSV file and return the result file as opaque bytes.

        Raises:
            AnalysisClientError: on transport or protocol failure.
        """

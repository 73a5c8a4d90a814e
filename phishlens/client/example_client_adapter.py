"""Example analysis client adapter.

Use this module for local development and demos when no classification
service is running. Register new transports in ClientFactory.
"""

import csv
import io
from typing import Any, ClassVar

from phishlens.client.base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Returns fixed responses without any network calls."""

    DEFAULT_FEATURES: ClassVar[dict[str, float]] = {
        "f1": 23.0,
        "f2": 11.0,
        "f4": 2.0,
        "f14": 3.0,
        "f25": 1.0,
    }

    async def analyze_url(self, url: str) -> dict[str, Any]:
        return {
            "url": url,
            "prediction": "legitimate",
            "is_safe": True,
            "features": dict(self.DEFAULT_FEATURES),
        }

    async def analyze_csv(self, filename: str, content: bytes) -> bytes:
        _ = filename
        reader = csv.DictReader(io.StringIO(content.decode("utf-8", errors="replace")))
        out = io.StringIO()
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(["url", "prediction", "is_safe"])
        for row in reader:
            url = (row.get("url") or "").strip()
            if url:
                writer.writerow([url, "legitimate", "true"])
        return out.getvalue().encode("utf-8")

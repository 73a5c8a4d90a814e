from typing import Any

import pytest

from phishlens.analysis.models import AnalysisResult, BulkAnalysisRequest


@pytest.fixture()
def phish_payload() -> dict[str, Any]:
    """A /analyze response for a phishing URL with a sparse feature set."""
    return {
        "url": "http://example-phish.test",
        "prediction": "phishing",
        "is_safe": False,
        "features": {"f3": 1, "f25": 0},
    }


@pytest.fixture()
def safe_payload() -> dict[str, Any]:
    return {
        "url": "https://example.com",
        "prediction": "legitimate",
        "is_safe": True,
        "features": {"f1": 19.0, "f2": 11.0, "f4": 1.0, "f25": 1.0},
    }


@pytest.fixture()
def phish_result(phish_payload: dict[str, Any]) -> AnalysisResult:
    return AnalysisResult(
        url=phish_payload["url"],
        prediction=phish_payload["prediction"],
        is_safe=phish_payload["is_safe"],
        features=phish_payload["features"],
    )


@pytest.fixture()
def sample_csv_bytes() -> bytes:
    return b"url\nhttps://example.com\nhttp://example-phish.test\n"


@pytest.fixture()
def bulk_request(sample_csv_bytes: bytes) -> BulkAnalysisRequest:
    return BulkAnalysisRequest(filename="urls.csv", content=sample_csv_bytes)


@pytest.fixture()
def result_csv_bytes() -> bytes:
    return (
        b"url,prediction,is_safe\n"
        b"https://example.com,legitimate,true\n"
        b"http://example-phish.test,phishing,false\n"
    )

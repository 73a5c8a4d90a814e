"""Validates a decoded /analyze response and builds an AnalysisResult."""

import math
from typing import Any

from phishlens.analysis.models import AnalysisResult
from phishlens.client.exceptions import MalformedResponseError


def validate_and_build(data: dict[str, Any]) -> AnalysisResult:
    """Check the response shape and build an AnalysisResult.

    A missing or null ``features`` object is read as empty; every id is then
    rendered with its default of 0.

    Raises:
        MalformedResponseError: on any shape violation.
    """
    url = _require_string(data, "url")
    prediction = _require_string(data, "prediction")
    is_safe = data.get("is_safe")
    if not isinstance(is_safe, bool):
        raise MalformedResponseError("'is_safe' must be a boolean")
    features = _build_features(data.get("features"))
    return AnalysisResult(url=url, prediction=prediction, is_safe=is_safe, features=features)


def _require_string(data: dict[str, Any], key: str) -> str:
    if key not in data:
        raise MalformedResponseError(f"Missing required field: {key}")
    value = data[key]
    if not isinstance(value, str):
        raise MalformedResponseError(f"'{key}' must be a string")
    return value


def _build_features(raw: Any) -> dict[str, float]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise MalformedResponseError("'features' must be an object")
    features: dict[str, float] = {}
    for key, value in raw.items():
        # bool is an int subclass but never a feature value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise MalformedResponseError(f"Feature '{key}' must be a number")
        try:
            number = float(value)
        except OverflowError as exc:
            raise MalformedResponseError(f"Feature '{key}' is out of range") from exc
        if not math.isfinite(number):
            raise MalformedResponseError(f"Feature '{key}' must be finite")
        features[key] = number
    return features

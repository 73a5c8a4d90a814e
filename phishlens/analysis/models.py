from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType


@dataclass(frozen=True)
class AnalysisRequest:
    """Single-URL submission."""

    url: str


@dataclass(frozen=True)
class BulkAnalysisRequest:
    """Batch submission: a CSV file handed to the service as-is."""

    filename: str
    content: bytes = field(repr=False)

    @classmethod
    def from_path(cls, path: Path) -> "BulkAnalysisRequest":
        """Read a user-selected file. Contents are not inspected."""
        return cls(filename=path.name, content=path.read_bytes())


@dataclass(frozen=True)
class AnalysisResult:
    """Verdict and feature values returned for a single URL.

    ``features`` may cover only part of the catalog; missing ids read as 0.
    """

    url: str
    prediction: str
    is_safe: bool
    features: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "features", MappingProxyType(dict(self.features)))

    def feature_value(self, feature_id: str) -> float:
        return self.features.get(feature_id, 0.0)

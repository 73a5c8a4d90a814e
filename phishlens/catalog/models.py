from dataclasses import dataclass


@dataclass(frozen=True)
class FeatureDefinition:
    """A single feature reported by the classification service."""

    id: str
    label: str


@dataclass(frozen=True)
class FeatureCategory:
    """A named display group of feature ids, in display order."""

    name: str
    feature_ids: tuple[str, ...]

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FeatureRow:
    """One displayed feature: catalog label and rounded value."""

    feature_id: str
    label: str
    value: int


@dataclass(frozen=True)
class CategorySection:
    name: str
    rows: list[FeatureRow] = field(default_factory=list)


@dataclass(frozen=True)
class AnalysisReport:
    """Display projection of an AnalysisResult through the feature catalog."""

    url: str
    prediction: str
    is_safe: bool
    badge: str
    alert_title: str
    sections: list[CategorySection] = field(default_factory=list)

    def value_of(self, feature_id: str) -> int:
        for section in self.sections:
            for row in section.rows:
                if row.feature_id == feature_id:
                    return row.value
        raise KeyError(feature_id)

import math

from phishlens.analysis.models import AnalysisResult
from phishlens.catalog.catalog import FeatureCatalog, default_catalog
from phishlens.report.models import AnalysisReport, CategorySection, FeatureRow

SAFE_BADGE = "Safe"
MALICIOUS_BADGE = "Potentially Malicious"
SAFE_ALERT_TITLE = "Safe URL Detected"
MALICIOUS_ALERT_TITLE = "Warning: Potential Phishing"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Matches the service dashboard's display rounding (2.5 -> 3, -2.5 -> -2),
    unlike the built-in round() which rounds halves to even.
    """
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


class ReportRenderer:
    """Joins a result's feature values with the catalog for display.

    Pure: the result is only read. Ids missing from the result render as 0;
    ids the catalog does not know are not rendered.
    """

    def __init__(self, catalog: FeatureCatalog | None = None) -> None:
        self._catalog = catalog if catalog is not None else default_catalog()

    def render(self, result: AnalysisResult) -> AnalysisReport:
        sections = [
            CategorySection(
                name=category.name,
                rows=[
                    FeatureRow(
                        feature_id=fid,
                        label=self._catalog.label_of(fid),
                        value=round_half_up(result.feature_value(fid)),
                    )
                    for fid in category.feature_ids
                ],
            )
            for category in self._catalog.categories()
        ]
        return AnalysisReport(
            url=result.url,
            prediction=result.prediction,
            is_safe=result.is_safe,
            badge=SAFE_BADGE if result.is_safe else MALICIOUS_BADGE,
            alert_title=SAFE_ALERT_TITLE if result.is_safe else MALICIOUS_ALERT_TITLE,
            sections=sections,
        )

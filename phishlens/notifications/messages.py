"""Fixed notification texts for both flows."""

from phishlens.analysis.models import AnalysisResult
from phishlens.notifications.models import Notification

URL_SAFE_TITLE = "URL Analysis Complete"
URL_THREAT_TITLE = "Warning: Potential Threat Detected"
URL_FAILED_TITLE = "Analysis Failed"
BULK_COMPLETE_TITLE = "Bulk Analysis Complete"
BULK_FAILED_TITLE = "Bulk Analysis Failed"


def url_result_notification(result: AnalysisResult) -> Notification:
    if result.is_safe:
        return Notification(
            title=URL_SAFE_TITLE,
            description="The URL appears to be safe",
        )
    return Notification(
        title=URL_THREAT_TITLE,
        description="The URL may be malicious",
        variant="destructive",
    )


def url_failure_notification() -> Notification:
    return Notification(
        title=URL_FAILED_TITLE,
        description="Could not complete URL analysis. Please try again.",
        variant="destructive",
    )


def bulk_success_notification() -> Notification:
    return Notification(
        title=BULK_COMPLETE_TITLE,
        description="Analysis results have been downloaded as a CSV file.",
    )


def bulk_failure_notification() -> Notification:
    return Notification(
        title=BULK_FAILED_TITLE,
        description="Could not complete bulk URL analysis. Please try again.",
        variant="destructive",
    )

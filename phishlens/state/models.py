from dataclasses import dataclass

from phishlens.analysis.models import AnalysisResult


@dataclass(frozen=True)
class IdleState:
    """Nothing submitted, or the flow was reset."""

    status: str = "idle"


@dataclass(frozen=True)
class LoadingState:
    """A request of this flow is in flight."""

    status: str = "loading"


@dataclass(frozen=True)
class SuccessState:
    """The last request succeeded. Bulk successes carry no result."""

    status: str = "success"
    result: AnalysisResult | None = None


@dataclass(frozen=True)
class ErrorState:
    """The last request failed with a user-facing message."""

    message: str
    status: str = "error"


SubmissionState = IdleState | LoadingState | SuccessState | ErrorState

IDLE = IdleState()
LOADING = LoadingState()

from dataclasses import dataclass

from phishlens.analysis.models import AnalysisResult


@dataclass(frozen=True)
class DispatchSuccess:
    """The remote call resolved with a usable response.

    Single-URL dispatches carry the AnalysisResult; bulk dispatches carry
    nothing because the artifact has already been delivered.
    """

    kind: str = "success"
    result: AnalysisResult | None = None


@dataclass(frozen=True)
class DispatchFailure:
    """The remote call failed; ``message`` is the user-facing text."""

    message: str
    kind: str = "failure"


DispatchOutcome = DispatchSuccess | DispatchFailure

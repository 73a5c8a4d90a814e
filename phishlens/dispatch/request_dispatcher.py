from phishlens.analysis.models import AnalysisRequest
from phishlens.client.base import BaseAnalysisClient
from phishlens.client.exceptions import AnalysisClientError
from phishlens.client.validator import validate_and_build
from phishlens.dispatch.base import BaseDispatcher
from phishlens.dispatch.exceptions import EmptyInputError
from phishlens.dispatch.models import DispatchFailure, DispatchOutcome, DispatchSuccess
from phishlens.logging.logger import Log

URL_FAILURE_MESSAGE = "Failed to analyze URL. Please try again."


class RequestDispatcher(BaseDispatcher[AnalysisRequest]):
    """Submits a single URL and turns the response into a typed outcome."""

    def __init__(self, client: BaseAnalysisClient) -> None:
        self._client = client

    async def dispatch(self, request: AnalysisRequest) -> DispatchOutcome:
        if not request.url.strip():
            raise EmptyInputError("URL must not be blank")

        Log.info(f"Analyzing URL {request.url}", flow="single")
        try:
            payload = await self._client.analyze_url(request.url)
            result = validate_and_build(payload)
        except AnalysisClientError as exc:
            Log.error(f"URL analysis failed: {exc}", flow="single")
            return DispatchFailure(message=URL_FAILURE_MESSAGE)

        Log.info(
            f"URL analysis complete: {result.prediction} "
            f"({len(result.features)} features)",
            flow="single",
        )
        return DispatchSuccess(result=result)

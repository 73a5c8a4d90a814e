from phishlens.analysis.models import BulkAnalysisRequest
from phishlens.client.base import BaseAnalysisClient
from phishlens.client.exceptions import AnalysisClientError
from phishlens.dispatch.base import BaseDispatcher
from phishlens.dispatch.download import BaseDownloadSink
from phishlens.dispatch.exceptions import DownloadError, NoFileSelectedError
from phishlens.dispatch.models import DispatchFailure, DispatchOutcome, DispatchSuccess
from phishlens.logging.logger import Log

BULK_FAILURE_MESSAGE = "Failed to analyze CSV file. Please try again."
RESULTS_FILENAME = "url_analysis_results.csv"


class BulkDispatcher(BaseDispatcher[BulkAnalysisRequest]):
    """Submits a CSV file and delivers the service's result file as a download.

    All-or-nothing: either the whole result file is delivered or the flow
    fails. Rows the service could not classify are its own concern.
    """

    def __init__(self, client: BaseAnalysisClient, sink: BaseDownloadSink) -> None:
        self._client = client
        self._sink = sink

    async def dispatch(self, request: BulkAnalysisRequest) -> DispatchOutcome:
        if not request.filename:
            raise NoFileSelectedError("No file selected for bulk analysis")

        Log.info(
            f"Submitting {request.filename} ({len(request.content)} bytes)", flow="bulk"
        )
        try:
            payload = await self._client.analyze_csv(request.filename, request.content)
            self._sink.save(payload, RESULTS_FILENAME)
        except (AnalysisClientError, DownloadError) as exc:
            Log.error(f"Bulk analysis failed: {exc}", flow="bulk")
            return DispatchFailure(message=BULK_FAILURE_MESSAGE)

        Log.info("Bulk analysis complete", flow="bulk")
        return DispatchSuccess()

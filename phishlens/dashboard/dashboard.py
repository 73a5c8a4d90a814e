from pathlib import Path

from phishlens.analysis.models import AnalysisRequest, BulkAnalysisRequest
from phishlens.client.base import BaseAnalysisClient
from phishlens.client.factory import ClientFactory
from phishlens.config.settings import Settings
from phishlens.dispatch.base import BaseDispatcher
from phishlens.dispatch.bulk_dispatcher import BulkDispatcher
from phishlens.dispatch.download import BaseDownloadSink, FileDownloadSink
from phishlens.dispatch.request_dispatcher import RequestDispatcher
from phishlens.logging.logger import Log
from phishlens.notifications.base import BaseNotifier
from phishlens.notifications.log_notifier import LogNotifier
from phishlens.notifications.messages import (
    bulk_failure_notification,
    bulk_success_notification,
    url_failure_notification,
    url_result_notification,
)
from phishlens.report.models import AnalysisReport
from phishlens.report.renderer import ReportRenderer
from phishlens.state.machine import SubmissionStateMachine
from phishlens.state.models import ErrorState, SubmissionState, SuccessState

CSV_FORMAT_REQUIREMENTS: tuple[str, ...] = (
    'The CSV file must contain a column named "url" with the URLs to analyze',
    "Each URL should be on a separate row",
    "Results will be downloaded automatically as a CSV file",
    "Large files may take several minutes to process",
)


class Dashboard:
    """Operator-facing controller for the single-URL and bulk-CSV flows.

    Each flow has its own state machine; they never share state. Submit
    actions are no-ops while their control would be disabled.
    """

    def __init__(
        self,
        *,
        request_dispatcher: BaseDispatcher[AnalysisRequest],
        bulk_dispatcher: BaseDispatcher[BulkAnalysisRequest],
        notifier: BaseNotifier,
        renderer: ReportRenderer | None = None,
    ) -> None:
        self._notifier = notifier
        self._renderer = renderer or ReportRenderer()
        self._url = ""
        self._selected_file: BulkAnalysisRequest | None = None
        self._last_failed: SubmissionStateMachine | None = None
        self.single: SubmissionStateMachine[AnalysisRequest] = SubmissionStateMachine(
            "single",
            request_dispatcher,
            on_settled=self._on_single_settled,
            on_reset=self._clear_url,
        )
        self.bulk: SubmissionStateMachine[BulkAnalysisRequest] = SubmissionStateMachine(
            "bulk",
            bulk_dispatcher,
            on_settled=self._on_bulk_settled,
            on_reset=self._clear_file,
        )

    @property
    def url(self) -> str:
        return self._url

    def set_url(self, value: str) -> None:
        self._url = value

    @property
    def selected_file(self) -> BulkAnalysisRequest | None:
        return self._selected_file

    def select_file(self, request: BulkAnalysisRequest | None) -> None:
        self._selected_file = request

    def select_path(self, path: Path) -> None:
        self.select_file(BulkAnalysisRequest.from_path(path))

    @property
    def can_submit_url(self) -> bool:
        return bool(self._url.strip()) and self.single.can_submit

    @property
    def can_submit_bulk(self) -> bool:
        return self._selected_file is not None and self.bulk.can_submit

    @property
    def submit_url_label(self) -> str:
        return "Analyzing..." if self.single.is_loading else "Analyze"

    @property
    def submit_bulk_label(self) -> str:
        return "Processing..." if self.bulk.is_loading else "Upload & Analyze"

    async def analyze_url(self) -> SubmissionState:
        if not self.can_submit_url:
            Log.debug("URL submit disabled", flow="single")
            return self.single.state
        return await self.single.submit(AnalysisRequest(url=self._url))

    async def analyze_bulk(self) -> SubmissionState:
        if not self.can_submit_bulk or self._selected_file is None:
            Log.debug("Bulk submit disabled", flow="bulk")
            return self.bulk.state
        return await self.bulk.submit(self._selected_file)

    def clear(self) -> None:
        """Drop the single-URL result or error and empty the URL field."""
        self.single.reset()

    def report(self) -> AnalysisReport | None:
        state = self.single.state
        if isinstance(state, SuccessState) and state.result is not None:
            return self._renderer.render(state.result)
        return None

    @property
    def error_message(self) -> str | None:
        """Message of the most recently failed flow still in Error, if any."""
        candidates: list[SubmissionStateMachine] = [self.single, self.bulk]
        if self._last_failed is not None:
            candidates.remove(self._last_failed)
            candidates.insert(0, self._last_failed)
        for machine in candidates:
            state = machine.state
            if isinstance(state, ErrorState):
                return state.message
        return None

    def _on_single_settled(self, state: SubmissionState) -> None:
        if isinstance(state, SuccessState) and state.result is not None:
            self._notifier.notify(url_result_notification(state.result))
        elif isinstance(state, ErrorState):
            self._last_failed = self.single
            self._notifier.notify(url_failure_notification())

    def _on_bulk_settled(self, state: SubmissionState) -> None:
        if isinstance(state, SuccessState):
            self._notifier.notify(bulk_success_notification())
        elif isinstance(state, ErrorState):
            self._last_failed = self.bulk
            self._notifier.notify(bulk_failure_notification())

    def _clear_url(self) -> None:
        self._url = ""

    def _clear_file(self) -> None:
        self._selected_file = None


def build_dashboard(
    settings: Settings,
    *,
    client: BaseAnalysisClient | None = None,
    sink: BaseDownloadSink | None = None,
    notifier: BaseNotifier | None = None,
) -> Dashboard:
    """Build a Dashboard with all adapters resolved from settings."""
    client = client or ClientFactory.create(settings)
    sink = sink or FileDownloadSink(settings.download_dir)
    return Dashboard(
        request_dispatcher=RequestDispatcher(client),
        bulk_dispatcher=BulkDispatcher(client, sink),
        notifier=notifier or LogNotifier(),
    )

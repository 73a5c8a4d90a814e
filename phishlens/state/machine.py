"""Per-flow submission lifecycle: Idle -> Loading -> Success | Error -> Idle."""

from collections.abc import Callable
from typing import Generic

from phishlens.dispatch.base import BaseDispatcher, RequestT
from phishlens.dispatch.models import DispatchFailure, DispatchOutcome, DispatchSuccess
from phishlens.logging.logger import Log
from phishlens.state.models import (
    IDLE,
    LOADING,
    ErrorState,
    LoadingState,
    SubmissionState,
    SuccessState,
)

SettledCallback = Callable[[SubmissionState], None]


class SubmissionStateMachine(Generic[RequestT]):
    """Owns the state of one flow and enforces single-flight submission.

    Every submission takes a ticket. ``reset()`` and newer submissions
    advance the generation, so an outcome whose ticket is no longer current
    is discarded instead of overwriting fresher state. In-flight calls are
    never aborted.
    """

    def __init__(
        self,
        name: str,
        dispatcher: BaseDispatcher[RequestT],
        *,
        on_settled: SettledCallback | None = None,
        on_reset: Callable[[], None] | None = None,
    ) -> None:
        self._name = name
        self._dispatcher = dispatcher
        self._on_settled = on_settled
        self._on_reset = on_reset
        self._state: SubmissionState = IDLE
        self._generation = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, LoadingState)

    @property
    def can_submit(self) -> bool:
        return not self.is_loading

    async def submit(self, request: RequestT) -> SubmissionState:
        """Dispatch ``request`` once and settle on its outcome.

        While a request of this flow is in flight the call is a no-op and the
        current state is returned unchanged.
        """
        if self.is_loading:
            Log.warning("Submission ignored: request already in flight", flow=self._name)
            return self._state

        self._generation += 1
        ticket = self._generation
        previous = self._state
        self._state = LOADING
        try:
            outcome = await self._dispatcher.dispatch(request)
        except BaseException:
            # rejected or cancelled before an outcome; nothing was applied
            if ticket == self._generation:
                self._state = previous
            raise
        return self.on_outcome(outcome, ticket)

    def on_outcome(self, outcome: DispatchOutcome, ticket: int) -> SubmissionState:
        """Apply a dispatch outcome if it belongs to the current submission."""
        if ticket != self._generation or not self.is_loading:
            Log.debug(
                f"Discarding late {outcome.kind} outcome (ticket {ticket}, "
                f"current {self._generation})",
                flow=self._name,
            )
            return self._state

        if isinstance(outcome, DispatchSuccess):
            self._state = SuccessState(result=outcome.result)
        elif isinstance(outcome, DispatchFailure):
            self._state = ErrorState(message=outcome.message)
        else:
            raise TypeError(f"Unsupported dispatch outcome: {outcome!r}")

        if self._on_settled is not None:
            self._on_settled(self._state)
        return self._state

    def reset(self) -> None:
        """Return to Idle from any state and forget any in-flight request."""
        self._generation += 1
        self._state = IDLE
        if self._on_reset is not None:
            self._on_reset()
        Log.debug("Flow reset", flow=self._name)

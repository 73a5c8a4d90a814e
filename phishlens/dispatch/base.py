from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from phishlens.dispatch.models import DispatchOutcome

RequestT = TypeVar("RequestT")


class BaseDispatcher(ABC, Generic[RequestT]):
    """Contract for flow dispatchers: one request, one remote call, one outcome."""

    @abstractmethod
    async def dispatch(self, request: RequestT) -> DispatchOutcome:
        """Issue the remote call for ``request`` and report how it ended.

        Remote failures are returned as DispatchFailure, never raised.
        """

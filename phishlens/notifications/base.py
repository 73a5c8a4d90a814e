from abc import ABC, abstractmethod

from phishlens.notifications.models import Notification


class BaseNotifier(ABC):
    """Contract for notification channels."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Deliver one notification. Must not raise on delivery problems."""

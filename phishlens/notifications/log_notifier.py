from phishlens.logging.logger import Log
from phishlens.notifications.base import BaseNotifier
from phishlens.notifications.models import Notification


class LogNotifier(BaseNotifier):
    """Writes notifications to the application log."""

    def notify(self, notification: Notification) -> None:
        message = f"{notification.title}: {notification.description}"
        if notification.is_destructive:
            Log.warning(message)
        else:
            Log.info(message)

from rich.console import Console
from rich.panel import Panel

from phishlens.notifications.base import BaseNotifier
from phishlens.notifications.models import Notification


class ConsoleNotifier(BaseNotifier):
    """Shows notifications as panels on a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    def notify(self, notification: Notification) -> None:
        style = "red" if notification.is_destructive else "green"
        self._console.print(
            Panel(
                notification.description,
                title=f"[bold]{notification.title}[/bold]",
                border_style=style,
                expand=False,
            )
        )

from dataclasses import dataclass


@dataclass(frozen=True)
class Notification:
    """A transient message shown to the operator after a flow settles."""

    title: str
    description: str
    variant: str = "default"

    @property
    def is_destructive(self) -> bool:
        return self.variant == "destructive"

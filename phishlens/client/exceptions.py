class AnalysisClientError(Exception):
    """Raised when a call to the classification service fails."""


class TransportFailureError(AnalysisClientError):
    """Raised when the service cannot be reached or the connection breaks."""


class ProtocolFailureError(AnalysisClientError):
    """Raised when the service answers with a non-success HTTP status."""

    def __init__(self, status_code: int, message: str = "") -> None:
        self.status_code = status_code
        super().__init__(message or f"Service responded with HTTP {status_code}")


class MalformedResponseError(AnalysisClientError):
    """Raised when the response body does not match the expected shape."""

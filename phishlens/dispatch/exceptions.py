class DispatchError(Exception):
    """Base exception for submissions rejected before any remote call."""


class EmptyInputError(DispatchError, ValueError):
    """Raised when a single-URL submission carries a blank URL."""


class NoFileSelectedError(DispatchError, ValueError):
    """Raised when a bulk submission is attempted without a file."""


class DownloadError(Exception):
    """Raised when a bulk result cannot be delivered to the download location."""

import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from phishlens.dispatch.exceptions import DownloadError
from phishlens.logging.logger import Log


class BaseDownloadSink(ABC):
    """Contract for delivering a downloaded artifact to the operator."""

    @abstractmethod
    def save(self, payload: bytes, filename: str) -> Path:
        """Deliver ``payload`` under ``filename`` and return where it landed.

        Raises:
            DownloadError: if the artifact cannot be delivered.
        """


class FileDownloadSink(BaseDownloadSink):
    """Writes downloads into a directory.

    The payload is staged in a temporary file next to the target and moved
    into place, so a failed write never leaves a partial result behind. The
    staging file is always released.
    """

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    def save(self, payload: bytes, filename: str) -> Path:
        target = self._directory / filename
        staged: str | None = None
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, staged = tempfile.mkstemp(dir=self._directory, suffix=".part")
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            os.replace(staged, target)
            staged = None
        except OSError as exc:
            raise DownloadError(f"Could not write {target}: {exc}") from exc
        finally:
            if staged is not None and os.path.exists(staged):
                os.remove(staged)
        Log.info(f"Saved {len(payload)} bytes to {target}")
        return target

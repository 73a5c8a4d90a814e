import logging
import sys
from typing import TextIO


class Log:
    """Centralized logging for the dashboard client.

    Records go to stderr so that command output on stdout stays parseable.
    Keyword context (``flow="single"``) is appended to the message as
    ``key=value`` pairs.
    """

    _logger: logging.Logger = logging.getLogger("phishlens")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Configure the logger level and attach a single stream handler.

        Calling it again retargets the existing handler instead of adding one.
        """
        cls._logger.setLevel(log_level.upper())
        target = stream or sys.stderr
        for existing in cls._logger.handlers:
            if isinstance(existing, logging.StreamHandler):
                existing.setStream(target)
                return
        handler = logging.StreamHandler(target)
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        )
        cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        cls._logger.info(cls._with_context(message, context))

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        cls._logger.error(cls._with_context(message, context))

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        cls._logger.warning(cls._with_context(message, context))

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        cls._logger.debug(cls._with_context(message, context))

    @staticmethod
    def _with_context(message: str, context: dict[str, object]) -> str:
        if not context:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} [{pairs}]"

import logging
import sys


class _DocumentFormatter(logging.Formatter):
    """Prefixes the message with the document name when one is attached."""

    def format(self, record: logging.LogRecord) -> str:
        document = getattr(record, "document", None)
        formatted = super().format(record)
        if document:
            prefix = f"[{record.levelname}] "
            return formatted.replace(prefix, f"{prefix}<{document}> ", 1)
        return formatted


class Log:
    """Centralized logging for the screening engine.

    Keyword arguments are attached to the record as extras; ``document=`` is
    rendered in the output so per-file messages from parallel workers stay
    attributable.
    """

    _logger: logging.Logger = logging.getLogger("screener")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                _DocumentFormatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log an error together with the active exception's traceback."""
        cls._logger.exception(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)

import logging
import sys
from typing import ClassVar


class Log:
    """Centralized logging for the API process.

    Third-party clients used during extraction and analysis log every request
    or parser operation; they are held at WARNING unless the application itself
    runs at DEBUG.
    """

    _logger: logging.Logger = logging.getLogger("research_portal")
    _NOISY_LOGGERS: ClassVar[tuple[str, ...]] = ("httpx", "httpcore", "openai", "pdfminer")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        level = log_level.upper()
        cls._logger.setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)
        third_party_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
        for name in cls._NOISY_LOGGERS:
            logging.getLogger(name).setLevel(third_party_level)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log an error together with the traceback of the exception being handled."""
        cls._logger.exception(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)

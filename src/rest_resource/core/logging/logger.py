"""
Request tracing logger.

Wraps a stdlib logger; extra fields are passed as keyword arguments and
sensitive values (Authorization header, token-like query params) are masked
before emission.
"""

import logging
import sys
from typing import Any, Dict, Optional

from ..utils import sanitize_headers, sanitize_url
from .config import LoggingConfig
from .formatters import get_formatter


def _mask_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    masked = dict(fields)
    if isinstance(masked.get('url'), str):
        masked['url'] = sanitize_url(masked['url'])
    if isinstance(masked.get('headers'), dict):
        masked['headers'] = sanitize_headers(masked['headers'])
    return masked


class RestClientLogger:
    """
    Logger used by Connection for diagnostic tracing.

    Example:
        >>> logger = RestClientLogger(LoggingConfig.create(level="DEBUG"))
        >>> logger.debug("Request", method="GET", url="https://api.example.com/users")
    """

    def __init__(self, config: Optional[LoggingConfig] = None, name: str = "rest_resource"):
        """
        Initialize logger.

        Args:
            config: Logging configuration (uses defaults if None)
            name: Logger name
        """
        self.config = config or LoggingConfig()
        self.name = name
        self._closed = False

        self._logger = logging.getLogger(name)
        self._logger.setLevel(getattr(logging, self.config.level.value))
        self._handler: Optional[logging.Handler] = None

        if self.config.enable_console:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(get_formatter(self.config.format.value))
            self._logger.addHandler(handler)
            self._logger.propagate = False
            self._handler = handler

    def _log(self, level: int, message: str, fields: Dict[str, Any], exc_info: bool = False) -> None:
        extra = dict(self.config.extra_fields)
        extra.update(_mask_fields(fields))
        self._logger.log(level, message, extra=extra, exc_info=exc_info)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log error with traceback; call from an exception handler."""
        self._log(logging.ERROR, message, kwargs, exc_info=True)

    def close(self) -> None:
        """
        Detach and close the console handler.

        Idempotent.
        """
        if self._closed:
            return

        if self._handler is not None:
            self._handler.flush()
            self._handler.close()
            self._logger.removeHandler(self._handler)
            self._logger.propagate = True
            self._handler = None

        self._closed = True

    def __enter__(self):
        """Context manager support."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Close logger on context exit."""
        self.close()
        return False

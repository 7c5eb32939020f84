"""
Logging for the REST client.

Example:
    >>> from rest_resource.core.logging import LoggingConfig, RestClientLogger
    >>>
    >>> config = LoggingConfig.create(level="DEBUG", format="json")
    >>> logger = RestClientLogger(config)
    >>> logger.debug("Request", method="GET", url="https://api.com")
"""

from .config import LoggingConfig, LogLevel, LogFormat
from .logger import RestClientLogger
from .formatters import JSONFormatter, TextFormatter, get_formatter

__all__ = [
    # Config
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    # Logger
    "RestClientLogger",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    "get_formatter",
]

"""REST Resource - resource-oriented REST client on requests and httpx."""

import logging
from importlib.metadata import version, PackageNotFoundError

from .core.connection import Connection, ConnectionFactory, DEFAULT_CONNECTION_FACTORY
from .core.resource import Resource
from .core.config import SSLConfig, ConnectionConfig
from .core.credentials import BasicCredentials, BearerCredentials
from .core.classifier import Outcome, OutcomeKind, classify
from .core.models import Result, PendingRequest, ClassifiedResponse
from .core.env_config import load_from_env, connection_from_env
from .core.logging import LoggingConfig, RestClientLogger
from .core.exceptions import (
    RestClientException,
    ConnectionError,
    Redirection,
    ClientError,
    BadRequest,
    UnauthorizedAccess,
    ForbiddenAccess,
    ResourceNotFound,
    MethodNotAllowed,
    ResourceConflict,
    ResourceGone,
    ResourceInvalid,
    ServerError,
    TransportError,
    NetworkError,
    TimeoutError,
    SSLError,
    ProxyError,
    InvalidResponseError,
    ConfigurationError,
)
from .formats import (
    Format,
    SuffixFormat,
    JSONCodec,
    ElementTreeCodec,
    json_format,
    xml_format,
    json_suffix_format,
    xml_suffix_format,
)
from .transport import RequestsTransport, HttpxQueuedTransport

# Set up logging - add NullHandler to prevent "No handler found" warnings
# Users can configure logging themselves using logging.getLogger('rest_resource')
logging.getLogger('rest_resource').addHandler(logging.NullHandler())

try:
    __version__ = version("rest-resource-core")
except PackageNotFoundError:
    # Package is not installed (development mode)
    __version__ = "0.0.0-dev"

__author__ = "REST Resource Contributors"
__license__ = "MIT"

__all__ = [
    # Core
    "Resource",
    "Connection",
    "ConnectionFactory",
    "DEFAULT_CONNECTION_FACTORY",
    "Result",
    "PendingRequest",
    "ClassifiedResponse",

    # Config
    "SSLConfig",
    "ConnectionConfig",
    "LoggingConfig",
    "RestClientLogger",
    "load_from_env",
    "connection_from_env",

    # Auth
    "BasicCredentials",
    "BearerCredentials",

    # Classification
    "Outcome",
    "OutcomeKind",
    "classify",

    # Formats
    "Format",
    "SuffixFormat",
    "JSONCodec",
    "ElementTreeCodec",
    "json_format",
    "xml_format",
    "json_suffix_format",
    "xml_suffix_format",

    # Transports
    "RequestsTransport",
    "HttpxQueuedTransport",

    # Exceptions
    "RestClientException",
    "ConnectionError",
    "Redirection",
    "ClientError",
    "BadRequest",
    "UnauthorizedAccess",
    "ForbiddenAccess",
    "ResourceNotFound",
    "MethodNotAllowed",
    "ResourceConflict",
    "ResourceGone",
    "ResourceInvalid",
    "ServerError",
    "TransportError",
    "NetworkError",
    "TimeoutError",
    "SSLError",
    "ProxyError",
    "InvalidResponseError",
    "ConfigurationError",
]

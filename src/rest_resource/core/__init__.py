"""Core REST client модули."""

from .config import SSLConfig, ConnectionConfig, DEFAULT_USER_AGENT
from .classifier import Outcome, OutcomeKind, classify, outcome_exception
from .credentials import BasicCredentials, BearerCredentials, Credentials
from .exceptions import (
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
from .models import (
    RequestSpec,
    ResponseEnvelope,
    ClassifiedResponse,
    Result,
    PendingRequest,
)
from .utils import build_query, join_path, merge_maps

__all__ = [
    # Config
    "SSLConfig",
    "ConnectionConfig",
    "DEFAULT_USER_AGENT",
    # Classification
    "Outcome",
    "OutcomeKind",
    "classify",
    "outcome_exception",
    # Credentials
    "BasicCredentials",
    "BearerCredentials",
    "Credentials",
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
    # Models
    "RequestSpec",
    "ResponseEnvelope",
    "ClassifiedResponse",
    "Result",
    "PendingRequest",
    # Utils
    "build_query",
    "join_path",
    "merge_maps",
]

# src/rest_resource/core/classifier.py
"""
HTTP status code classification.

Maps a status code onto an Outcome. Specific codes are checked before the
ranges that contain them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Type, Union

from .exceptions import (
    BadRequest,
    ClientError,
    ConnectionError,
    ForbiddenAccess,
    MethodNotAllowed,
    Redirection,
    ResourceConflict,
    ResourceGone,
    ResourceInvalid,
    ResourceNotFound,
    ServerError,
    UnauthorizedAccess,
)


class OutcomeKind(str, Enum):
    """Kinds of classified outcomes."""
    SUCCESS = "success"
    REDIRECTION = "redirection"
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED_ACCESS = "unauthorized_access"
    FORBIDDEN_ACCESS = "forbidden_access"
    RESOURCE_NOT_FOUND = "resource_not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    RESOURCE_CONFLICT = "resource_conflict"
    RESOURCE_GONE = "resource_gone"
    RESOURCE_INVALID = "resource_invalid"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    CONNECTION_ERROR = "connection_error"


@dataclass(frozen=True)
class Outcome:
    """
    Classified result of a completed HTTP exchange.

    Attributes:
        kind: OutcomeKind
        message: Optional message (only set for unknown response codes)

    Example:
        >>> classify(404)
        Outcome(kind=<OutcomeKind.RESOURCE_NOT_FOUND: 'resource_not_found'>, message=None)
    """
    kind: OutcomeKind
    message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @property
    def is_error(self) -> bool:
        return not self.is_success


SUCCESS = Outcome(OutcomeKind.SUCCESS)

# Exact codes, checked before the ranges
_EXACT_CODES: Dict[int, OutcomeKind] = {
    400: OutcomeKind.BAD_REQUEST,
    401: OutcomeKind.UNAUTHORIZED_ACCESS,
    403: OutcomeKind.FORBIDDEN_ACCESS,
    404: OutcomeKind.RESOURCE_NOT_FOUND,
    405: OutcomeKind.METHOD_NOT_ALLOWED,
    409: OutcomeKind.RESOURCE_CONFLICT,
    410: OutcomeKind.RESOURCE_GONE,
    422: OutcomeKind.RESOURCE_INVALID,
}

_EXCEPTIONS: Dict[OutcomeKind, Type[ConnectionError]] = {
    OutcomeKind.REDIRECTION: Redirection,
    OutcomeKind.BAD_REQUEST: BadRequest,
    OutcomeKind.UNAUTHORIZED_ACCESS: UnauthorizedAccess,
    OutcomeKind.FORBIDDEN_ACCESS: ForbiddenAccess,
    OutcomeKind.RESOURCE_NOT_FOUND: ResourceNotFound,
    OutcomeKind.METHOD_NOT_ALLOWED: MethodNotAllowed,
    OutcomeKind.RESOURCE_CONFLICT: ResourceConflict,
    OutcomeKind.RESOURCE_GONE: ResourceGone,
    OutcomeKind.RESOURCE_INVALID: ResourceInvalid,
    OutcomeKind.CLIENT_ERROR: ClientError,
    OutcomeKind.SERVER_ERROR: ServerError,
    OutcomeKind.CONNECTION_ERROR: ConnectionError,
}


def _unknown(status_code: Any) -> Outcome:
    return Outcome(OutcomeKind.CONNECTION_ERROR, f"Unknown response code: {status_code}")


def classify(status_code: Union[int, str, None]) -> Outcome:
    """
    Classify HTTP status code.

    Args:
        status_code: Status code (int, or anything int() accepts)

    Returns:
        Outcome

    Examples:
        >>> classify(200).kind
        <OutcomeKind.SUCCESS: 'success'>
        >>> classify(302).kind
        <OutcomeKind.REDIRECTION: 'redirection'>
        >>> classify(999)
        Outcome(kind=<OutcomeKind.CONNECTION_ERROR: 'connection_error'>, message='Unknown response code: 999')
    """
    try:
        code = int(status_code)
    except (TypeError, ValueError):
        return _unknown(status_code)

    if code in (301, 302):
        return Outcome(OutcomeKind.REDIRECTION)
    if 200 <= code < 400:
        return SUCCESS
    if code in _EXACT_CODES:
        return Outcome(_EXACT_CODES[code])
    if 401 <= code < 500:
        return Outcome(OutcomeKind.CLIENT_ERROR)
    if 500 <= code < 600:
        return Outcome(OutcomeKind.SERVER_ERROR)
    return _unknown(status_code)


def outcome_exception(outcome: Outcome, response: Any = None) -> Optional[ConnectionError]:
    """
    Build the specific exception for an error outcome.

    Args:
        outcome: Classified outcome
        response: Response to attach to the exception

    Returns:
        Exception instance, or None for success
    """
    if outcome.is_success:
        return None
    exc_class = _EXCEPTIONS[outcome.kind]
    return exc_class(response, outcome.message)

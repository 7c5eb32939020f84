"""Transports: blocking (requests) and queued (httpx)."""

from .base import Transport, QueuedTransport, CompletionCallback
from .session_cache import SessionCache
from .sync_transport import RequestsTransport, classify_requests_exception
from .queued_transport import HttpxQueuedTransport, classify_httpx_exception

__all__ = [
    "Transport",
    "QueuedTransport",
    "CompletionCallback",
    "SessionCache",
    "RequestsTransport",
    "classify_requests_exception",
    "HttpxQueuedTransport",
    "classify_httpx_exception",
]

"""Transport capabilities consumed by Connection."""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from ..core.models import RequestSpec, ResponseEnvelope

# on_complete(envelope, error): exactly one of the two is not None
CompletionCallback = Callable[[Optional[ResponseEnvelope], Optional[Exception]], None]


class Transport(ABC):
    """
    Blocking transport: one request per call.

    Implementations raise TransportError subclasses on protocol failures
    and never retry.
    """

    queued = False

    @abstractmethod
    def execute(self, spec: RequestSpec) -> ResponseEnvelope:
        """Send one request and wait for its response."""

    def invalidate(self) -> None:
        """Drop cached connection state."""

    def close(self) -> None:
        """Release all resources."""
        self.invalidate()


class QueuedTransport(ABC):
    """
    Queued transport: requests are enqueued, then executed together.

    No I/O happens in `enqueue`. `run_all` performs every queued request
    concurrently and returns once each callback has been invoked.
    """

    queued = True

    @abstractmethod
    def enqueue(self, spec: RequestSpec, on_complete: CompletionCallback) -> None:
        """Add a request to the queue."""

    @abstractmethod
    def run_all(self) -> None:
        """Execute all queued requests (blocking)."""

    @property
    @abstractmethod
    def pending(self) -> int:
        """Number of requests waiting for the next drain."""

    def invalidate(self) -> None:
        """Drop cached connection state."""

    def close(self) -> None:
        """Release all resources."""
        self.invalidate()

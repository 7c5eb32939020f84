"""
Pytest configuration and fixtures for rest-resource-core tests.
"""

import pytest
import responses as responses_lib

from rest_resource.core.connection import Connection
from rest_resource.core.logging.config import LoggingConfig
from rest_resource.core.models import ResponseEnvelope
from rest_resource.transport.base import QueuedTransport, Transport


class RecordingTransport(Transport):
    """
    In-memory transport: records every RequestSpec and replays canned envelopes.

    Example:
        transport = RecordingTransport()
        transport.reply(201, b'{"id": 1}', {"Content-Type": "application/json"})
    """

    def __init__(self):
        self.requests = []
        self._replies = []
        self.invalidations = 0
        self.closed = False

    def reply(self, status_code=200, body=b"", headers=None, reason="OK"):
        self._replies.append(("envelope", (status_code, body, headers or {}, reason)))
        return self

    def fail(self, error):
        self._replies.append(("error", error))
        return self

    def _next(self, spec):
        self.requests.append(spec)
        if not self._replies:
            return ResponseEnvelope(200, {}, b"", spec.url, "OK")
        kind, payload = self._replies.pop(0)
        if kind == "error":
            raise payload
        status_code, body, headers, reason = payload
        return ResponseEnvelope(status_code, headers, body, spec.url, reason)

    def execute(self, spec):
        return self._next(spec)

    def invalidate(self):
        self.invalidations += 1

    def close(self):
        self.closed = True

    @property
    def last(self):
        return self.requests[-1]


class FakeQueuedTransport(QueuedTransport):
    """Queued transport that completes requests from a RecordingTransport on run_all()."""

    def __init__(self):
        self.inner = RecordingTransport()
        self.queue = []
        self.runs = 0

    def reply(self, *args, **kwargs):
        self.inner.reply(*args, **kwargs)
        return self

    def fail(self, error):
        self.inner.fail(error)
        return self

    @property
    def requests(self):
        return self.inner.requests

    @property
    def pending(self):
        return len(self.queue)

    def enqueue(self, spec, on_complete):
        self.queue.append((spec, on_complete))

    def run_all(self):
        self.runs += 1
        while self.queue:
            batch, self.queue = self.queue, []
            for spec, on_complete in batch:
                try:
                    envelope = self.inner.execute(spec)
                except Exception as e:
                    on_complete(None, e)
                else:
                    on_complete(envelope, None)

    def invalidate(self):
        self.inner.invalidate()

    def close(self):
        self.inner.close()


@pytest.fixture
def site():
    """Base URL for testing."""
    return "https://api.example.com"


@pytest.fixture
def mock_responses():
    """Mock HTTP responses using responses library."""
    with responses_lib.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def recording_transport():
    return RecordingTransport()


@pytest.fixture
def queued_transport():
    return FakeQueuedTransport()


@pytest.fixture
def connection(site, recording_transport):
    """Connection over an in-memory transport."""
    conn = Connection(site, transport=recording_transport)
    yield conn
    conn.close()


@pytest.fixture
def queued_connection(site, queued_transport):
    conn = Connection(site, transport=queued_transport)
    yield conn
    conn.close()


@pytest.fixture
def logging_config():
    """LoggingConfig fixture for testing."""
    return LoggingConfig.create(level="DEBUG", enable_console=False)

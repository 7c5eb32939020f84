"""
Request/response value objects.

RequestSpec is built fresh per call and handed to a transport.
ResponseEnvelope is what a transport returns; the connection attaches an
Outcome to it, producing a ClassifiedResponse. Resource wraps the
classified response and the decoded body into a Result.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, TYPE_CHECKING

from requests.structures import CaseInsensitiveDict

from .classifier import Outcome, classify, outcome_exception
from .config import SSLConfig
from .utils import build_query

if TYPE_CHECKING:
    from .connection import Connection

# Methods whose params travel as a form body when no explicit body is given
FORM_METHODS = frozenset({"POST", "PUT"})


@dataclass
class RequestSpec:
    """
    One prepared request.

    Attributes:
        method: HTTP method (GET, POST, ...)
        site: `scheme://host[:port]`
        path: Absolute path on the site
        params: Query (or form) params, None values are bare keys
        headers: Final request headers (auth included)
        body: Encoded body, None if the caller supplied none
        timeout: Seconds, None = no limit
        proxy: Proxy URL
        ssl: TLS options
        asynchronous: Whether the request was submitted through the queue
    """

    method: str
    site: str
    path: str
    params: Dict[str, Any] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    timeout: Optional[float] = None
    proxy: Optional[str] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    asynchronous: bool = False

    def __post_init__(self):
        self.method = self.method.upper()

    @property
    def sends_form(self) -> bool:
        """POST/PUT without body send params as a urlencoded form."""
        return self.method in FORM_METHODS and self.body is None

    @property
    def query(self) -> str:
        return "" if self.sends_form else build_query(self.params)

    @property
    def url(self) -> str:
        """Absolute URL including the query string."""
        url = self.site + (self.path or "/")
        query = self.query
        return f"{url}?{query}" if query else url

    def wire_body(self) -> bytes:
        """Body bytes actually sent."""
        if self.body is not None:
            return self.body
        if self.sends_form:
            return build_query(self.params).encode("ascii")
        return b""

    def wire_headers(self) -> Dict[str, str]:
        """Headers actually sent (form content type added when needed)."""
        headers = dict(self.headers)
        if self.sends_form and self.params:
            if not any(k.lower() == "content-type" for k in headers):
                headers["Content-Type"] = "application/x-www-form-urlencoded"
        return headers

    def transport_options(self):
        """Options that require rebuilding a cached transport connection."""
        return (self.proxy, self.timeout, self.ssl)


@dataclass
class ResponseEnvelope:
    """
    Raw transport result.

    Attributes:
        status_code: HTTP status
        headers: Response headers (case-insensitive)
        body: Response body bytes (None for HEAD / no content)
        url: Requested URL
        reason: Reason phrase
        elapsed_ms: Round-trip time
    """

    status_code: Any
    headers: Mapping[str, str] = field(default_factory=CaseInsensitiveDict)
    body: Optional[bytes] = None
    url: Optional[str] = None
    reason: str = ""
    elapsed_ms: float = 0.0

    def __post_init__(self):
        if not isinstance(self.headers, CaseInsensitiveDict):
            self.headers = CaseInsensitiveDict(self.headers or {})

    @property
    def text(self) -> str:
        return (self.body or b"").decode("utf-8", errors="replace")


@dataclass
class ClassifiedResponse(ResponseEnvelope):
    """ResponseEnvelope plus its classified Outcome."""

    outcome: Optional[Outcome] = None

    def __post_init__(self):
        super().__post_init__()
        if self.outcome is None:
            self.outcome = classify(self.status_code)

    @classmethod
    def from_envelope(cls, envelope: ResponseEnvelope) -> 'ClassifiedResponse':
        return cls(
            status_code=envelope.status_code,
            headers=envelope.headers,
            body=envelope.body,
            url=envelope.url,
            reason=envelope.reason,
            elapsed_ms=envelope.elapsed_ms,
            outcome=classify(envelope.status_code),
        )

    @property
    def ok(self) -> bool:
        return self.outcome.is_success

    @property
    def exception(self):
        """Specific error for this outcome, None on success."""
        return outcome_exception(self.outcome, self)

    def raise_for_outcome(self) -> 'ClassifiedResponse':
        exc = self.exception
        if exc is not None:
            raise exc
        return self


class Result:
    """
    Outcome of a verb call.

    Accessing `value` raises the stored error (the specific status error, a
    decode error, or a transport failure in async mode). Use `ok` / `error`
    to branch without raising.

    Example:
        >>> result = users.post(data={"name": "a"})
        >>> if result.ok:
        ...     print(result.value["id"])
        ... else:
        ...     print(result.status_code, result.error)
    """

    def __init__(
        self,
        value: Any = None,
        classified: Optional[ClassifiedResponse] = None,
        exception: Optional[BaseException] = None,
    ):
        self._value = value
        self.classified = classified
        if exception is None and classified is not None:
            exception = classified.exception
        self.exception = exception

    @property
    def value(self) -> Any:
        if self.exception is not None:
            raise self.exception
        return self._value

    @property
    def ok(self) -> bool:
        return self.exception is None

    @property
    def error(self) -> Optional[BaseException]:
        return self.exception

    @property
    def outcome(self) -> Optional[Outcome]:
        return self.classified.outcome if self.classified is not None else None

    @property
    def status_code(self):
        return self.classified.status_code if self.classified is not None else None

    @property
    def headers(self) -> Mapping[str, str]:
        if self.classified is None:
            return CaseInsensitiveDict()
        return self.classified.headers

    @property
    def body(self) -> Optional[bytes]:
        return self.classified.body if self.classified is not None else None

    def __repr__(self) -> str:
        state = "ok" if self.ok else type(self.exception).__name__
        return f"<Result {self.status_code} {state}>"


class PendingRequest:
    """
    Handle returned by a queued verb call.

    The result becomes available once the connection's queue is drained,
    either explicitly with `Connection.run()` or through `wait()`.
    """

    def __init__(self, connection: 'Connection', on_complete: Optional[Callable[[Result], Any]] = None):
        self._connection = connection
        self._on_complete = on_complete
        self._result: Optional[Result] = None

    @property
    def done(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> Optional[Result]:
        return self._result

    def wait(self) -> Result:
        """Drain the connection queue if needed and return the Result."""
        if self._result is None:
            self._connection.run()
        if self._result is None:
            raise RuntimeError("Request did not complete after the queue was drained")
        return self._result

    def _resolve(self, result: Result) -> None:
        self._result = result
        if self._on_complete is not None:
            self._on_complete(result)

# src/rest_resource/transport/queued_transport.py
"""
Queued transport built on httpx.

Requests are collected with `enqueue` and executed together by `run_all`,
which dispatches the whole batch concurrently on an asyncio event loop.
Each request's callback fires as soon as that request finishes, so
callbacks run in network order, not submission order.
"""

import asyncio
import logging
import ssl as ssl_lib
import threading
import time
from contextlib import AsyncExitStack
from typing import Dict, List, Optional, Tuple, Union

try:
    import httpx
except ImportError:
    raise ImportError(
        "httpx is required for HttpxQueuedTransport. "
        "Install with: pip install rest-resource-core"
    )

from ..core.config import SSLConfig
from ..core.exceptions import (
    NetworkError,
    ProxyError,
    SSLError,
    TimeoutError,
    TransportError,
)
from ..core.models import RequestSpec, ResponseEnvelope
from .base import CompletionCallback, QueuedTransport

logger = logging.getLogger(__name__)


def _caused_by_ssl(exc: BaseException) -> bool:
    """Walk the exception chain looking for an ssl.SSLError."""
    seen = set()
    while exc is not None and id(exc) not in seen:
        if isinstance(exc, ssl_lib.SSLError):
            return True
        seen.add(id(exc))
        exc = exc.__cause__ or exc.__context__
    return False


def classify_httpx_exception(
    exc: Exception,
    url: str,
    timeout: Optional[float] = None,
    proxy: Optional[str] = None,
) -> TransportError:
    """
    Конвертировать httpx исключения в наши.

    Examples:
        >>> exc = httpx.ReadTimeout("timed out")
        >>> isinstance(classify_httpx_exception(exc, "https://example.com"), TimeoutError)
        True
    """
    if isinstance(exc, httpx.TimeoutException):
        return TimeoutError("Request timeout", url, timeout)

    elif isinstance(exc, httpx.ProxyError):
        return ProxyError("Proxy error", url, proxy)

    elif _caused_by_ssl(exc):
        return SSLError(f"SSL error: {exc}", url)

    elif isinstance(exc, httpx.ConnectError):
        return NetworkError(f"Connection error: {exc}", url)

    else:
        return NetworkError(f"Request failed: {exc}", url)


def build_verify(ssl: SSLConfig) -> Union[bool, ssl_lib.SSLContext]:
    """
    Translate SSLConfig into httpx's `verify` argument.

    Custom CA bundles and client certificates need an SSLContext.
    """
    if not ssl.verify:
        return False
    if not (ssl.ca_file or ssl.ca_path or ssl.cert_file):
        return True

    context = ssl_lib.create_default_context(cafile=ssl.ca_file, capath=ssl.ca_path)
    if ssl.cert_file:
        context.load_cert_chain(ssl.cert_file, ssl.key_file)
    return context


class HttpxQueuedTransport(QueuedTransport):
    """
    Queued transport executing batches concurrently through httpx.AsyncClient.

    `enqueue` is thread-safe and never performs I/O. `run_all` must not run
    concurrently with itself on the same transport.

    Example:
        >>> transport = HttpxQueuedTransport()
        >>> transport.enqueue(spec_a, on_complete)
        >>> transport.enqueue(spec_b, on_complete)
        >>> transport.run_all()  # both requests in flight together
    """

    def __init__(self, max_connections: int = 10):
        self._max_connections = max_connections
        self._queue: List[Tuple[RequestSpec, CompletionCallback]] = []
        self._lock = threading.Lock()
        self._running = False

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._queue)

    @property
    def running(self) -> bool:
        return self._running

    def enqueue(self, spec: RequestSpec, on_complete: CompletionCallback) -> None:
        with self._lock:
            self._queue.append((spec, on_complete))

    def run_all(self) -> None:
        """
        Execute everything queued, blocking until every callback has fired.

        Must be called outside a running event loop; async code should
        await `arun_all()` instead.
        """
        if self.pending == 0:
            return
        asyncio.run(self.arun_all())

    async def arun_all(self) -> None:
        """
        Awaitable drain.

        Requests enqueued by callbacks during a round run in the next round.

        Raises:
            RuntimeError: If a drain is already in progress
        """
        with self._lock:
            if self._running:
                raise RuntimeError("run_all() is already draining this queue")
            self._running = True

        try:
            while True:
                with self._lock:
                    batch, self._queue = self._queue, []
                if not batch:
                    break
                await self._dispatch(batch)
        finally:
            with self._lock:
                self._running = False

    async def _dispatch(self, batch: List[Tuple[RequestSpec, CompletionCallback]]) -> None:
        """Run one batch with one client per distinct proxy/TLS combination."""
        async with AsyncExitStack() as stack:
            clients: Dict[tuple, httpx.AsyncClient] = {}
            jobs = []
            for spec, on_complete in batch:
                key = (spec.proxy, spec.ssl)
                client = clients.get(key)
                if client is None:
                    try:
                        client = await stack.enter_async_context(self._create_client(spec))
                    except Exception as e:
                        # Плохие TLS файлы одного запроса не трогают соседей по батчу
                        self._complete(spec, on_complete, None, self._wrap_error(e, spec))
                        continue
                    clients[key] = client
                jobs.append(self._send(client, spec, on_complete))

            logger.debug("Dispatching batch", extra={"size": len(jobs), "clients": len(clients)})
            await asyncio.gather(*jobs)

    def _create_client(self, spec: RequestSpec) -> httpx.AsyncClient:
        """Создать httpx клиент для набора опций."""
        client_kwargs = {
            "verify": build_verify(spec.ssl or SSLConfig()),
            "follow_redirects": False,
            "limits": httpx.Limits(max_connections=self._max_connections),
            "trust_env": True,
        }
        if spec.proxy:
            client_kwargs["proxy"] = spec.proxy
        return httpx.AsyncClient(**client_kwargs)

    async def _send(self, client: httpx.AsyncClient, spec: RequestSpec, on_complete: CompletionCallback) -> None:
        url = spec.url
        envelope: Optional[ResponseEnvelope] = None
        error: Optional[TransportError] = None

        start_time = time.time()
        try:
            response = await client.request(
                spec.method,
                url,
                content=spec.wire_body() or None,
                headers=spec.wire_headers(),
                timeout=spec.timeout,
            )
            envelope = ResponseEnvelope(
                status_code=response.status_code,
                headers=dict(response.headers),
                body=response.content,
                url=url,
                reason=response.reason_phrase or "",
                elapsed_ms=round((time.time() - start_time) * 1000, 2),
            )
        except Exception as e:
            # включая не-httpx ошибки, например UnicodeEncodeError в заголовке
            error = self._wrap_error(e, spec)

        self._complete(spec, on_complete, envelope, error)

    @staticmethod
    def _wrap_error(exc: Exception, spec: RequestSpec) -> TransportError:
        error = classify_httpx_exception(exc, spec.url, spec.timeout, spec.proxy)
        error.__cause__ = exc
        return error

    @staticmethod
    def _complete(
        spec: RequestSpec,
        on_complete: CompletionCallback,
        envelope: Optional[ResponseEnvelope],
        error: Optional[TransportError],
    ) -> None:
        try:
            on_complete(envelope, error)
        except Exception:
            # Один упавший callback не должен ронять остальные запросы батча
            logger.exception("Error in completion callback", extra={"url": spec.url})

# src/rest_resource/transport/sync_transport.py
"""
Blocking transport built on requests.

Exactly one request per `execute` call; redirects are not followed and
nothing is retried.
"""

import logging
import time
from typing import Optional

import requests
from requests.adapters import HTTPAdapter

from ..core.config import SSLConfig
from ..core.exceptions import (
    NetworkError,
    ProxyError,
    SSLError,
    TimeoutError,
    TransportError,
)
from ..core.models import RequestSpec, ResponseEnvelope
from ..core.utils import site_key
from .base import Transport
from .session_cache import SessionCache

logger = logging.getLogger(__name__)


def classify_requests_exception(
    exc: Exception,
    url: str,
    timeout: Optional[float] = None,
    proxy: Optional[str] = None,
) -> TransportError:
    """
    Конвертировать requests.exceptions в наши исключения.

    Args:
        exc: Исключение из requests
        url: URL запроса
        timeout: Таймаут запроса
        proxy: Прокси запроса

    Returns:
        TransportError подходящего типа

    Examples:
        >>> exc = requests.exceptions.Timeout()
        >>> isinstance(classify_requests_exception(exc, "https://example.com"), TimeoutError)
        True
    """
    # SSLError и ProxyError наследуют ConnectionError в requests - проверяем раньше
    if isinstance(exc, requests.exceptions.SSLError):
        return SSLError(f"SSL error: {exc}", url)

    elif isinstance(exc, requests.exceptions.Timeout):
        return TimeoutError("Request timeout", url, timeout)

    elif isinstance(exc, requests.exceptions.ProxyError):
        return ProxyError("Proxy error", url, proxy)

    elif isinstance(exc, requests.exceptions.ConnectionError):
        return NetworkError(f"Connection error: {exc}", url)

    else:
        return NetworkError(f"Request failed: {exc}", url)


class RequestsTransport(Transport):
    """
    Transport executing each request synchronously through requests.

    Sessions are cached per (scheme, host, port) and rebuilt whenever the
    proxy, timeout or TLS options of a request differ from those the cached
    session was built with.

    Example:
        >>> transport = RequestsTransport()
        >>> envelope = transport.execute(RequestSpec("GET", "https://api.example.com", "/users"))
        >>> envelope.status_code
        200
    """

    def __init__(self, pool_maxsize: int = 10):
        self._pool_maxsize = pool_maxsize
        self._sessions = SessionCache(session_factory=self._create_session)

    def _create_session(self, options) -> requests.Session:
        """Create configured session."""
        proxy, _timeout, ssl = options
        ssl = ssl or SSLConfig()
        session = requests.Session()

        adapter = HTTPAdapter(
            pool_connections=1,
            pool_maxsize=self._pool_maxsize,
            max_retries=0,
        )
        session.mount('http://', adapter)
        session.mount('https://', adapter)

        if proxy:
            session.proxies.update({'http': proxy, 'https': proxy})

        if not ssl.verify:
            session.verify = False
        elif ssl.ca_file or ssl.ca_path:
            session.verify = ssl.ca_file or ssl.ca_path
        session.cert = ssl.client_cert

        logger.debug("Session created", extra={"proxy": proxy, "verify": session.verify})
        return session

    @property
    def sessions(self) -> SessionCache:
        return self._sessions

    def execute(self, spec: RequestSpec) -> ResponseEnvelope:
        """
        Send one request.

        Raises:
            TimeoutError: Request timed out
            SSLError: TLS failure
            ProxyError: Proxy failure
            NetworkError: Any other connection failure
        """
        url = spec.url
        session = self._sessions.get_session(site_key(spec.site), spec.transport_options())

        start_time = time.time()
        try:
            response = session.request(
                method=spec.method,
                url=url,
                data=spec.wire_body() or None,
                headers=spec.wire_headers(),
                timeout=spec.timeout,
                allow_redirects=False,
            )
        except requests.exceptions.RequestException as e:
            raise classify_requests_exception(e, url, spec.timeout, spec.proxy) from e

        return ResponseEnvelope(
            status_code=response.status_code,
            headers=response.headers,
            body=response.content,
            url=url,
            reason=response.reason or "",
            elapsed_ms=round((time.time() - start_time) * 1000, 2),
        )

    def invalidate(self) -> None:
        self._sessions.close_all()

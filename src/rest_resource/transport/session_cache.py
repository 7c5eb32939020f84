# src/rest_resource/transport/session_cache.py
"""
Thread-safe cache of requests.Session objects.

One session per (scheme, host, port). Each entry remembers the transport
options it was configured with; a request arriving with different options
closes the cached session and builds a new one, so a stale session is never
reused across a configuration change.
"""
import threading
from typing import Any, Callable, Dict, Hashable, Tuple

import requests

SessionFactory = Callable[[Any], requests.Session]


class SessionCache:
    """
    Caches configured sessions keyed by site.

    Example:
        >>> cache = SessionCache(session_factory)
        >>> session = cache.get_session(("https", "api.example.com", 443), options)
        >>> cache.close_all()
    """

    def __init__(self, session_factory: SessionFactory):
        """
        Initialize the session cache.

        Args:
            session_factory: Callable building a Session for a given options value
        """
        self._session_factory = session_factory
        self._sessions: Dict[Hashable, Tuple[Any, requests.Session]] = {}
        self._lock = threading.Lock()

    def get_session(self, key: Hashable, options: Any) -> requests.Session:
        """
        Get the session for `key`, rebuilding it if `options` changed.

        Args:
            key: Site key (scheme, host, port)
            options: Hashable fingerprint of proxy/timeout/TLS options

        Returns:
            Configured requests.Session
        """
        with self._lock:
            entry = self._sessions.get(key)
            if entry is not None:
                cached_options, session = entry
                if cached_options == options:
                    return session
                session.close()

            session = self._session_factory(options)
            self._sessions[key] = (options, session)
            return session

    def invalidate(self, key: Hashable) -> None:
        """Close and forget the session for one site."""
        with self._lock:
            entry = self._sessions.pop(key, None)
        if entry is not None:
            entry[1].close()

    def close_all(self) -> None:
        """
        Close all cached sessions.

        Safe to call multiple times.
        """
        with self._lock:
            entries = list(self._sessions.values())
            self._sessions.clear()

        for _, session in entries:
            session.close()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._sessions

    def __enter__(self):
        """Context manager support."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Close all sessions on context exit."""
        self.close_all()
        return False

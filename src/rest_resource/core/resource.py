# src/rest_resource/core/resource.py
"""
Resource: a reusable handle on one REST endpoint.

A Resource is a template (connection, path, params, headers, format). It
performs no I/O until a verb is called. Descending builds a new Resource;
the parent's maps are copied, never mutated, so sibling resources can be
used from different threads without locking.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from .connection import DEFAULT_CONNECTION_FACTORY, Connection, ConnectionFactory
from .exceptions import InvalidResponseError
from .models import ClassifiedResponse, PendingRequest, Result
from .utils import join_path, merge_maps, split_path_query

logger = logging.getLogger(__name__)

ResultCallback = Callable[[Result], Any]


class Resource:
    """
    Handle on a REST endpoint.

    Example:
        >>> api = Resource.from_url("https://api.example.com", format=json_format())
        >>> users = api["users"]
        >>> users.get({"id": "7"}).value
        [{'id': 7, 'name': 'a'}]
        >>> users.post(data={"name": "b"}).status_code
        201
    """

    def __init__(
        self,
        connection: Connection,
        path: str = "",
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        format: Optional[Any] = None,
    ):
        """
        Args:
            connection: Connection shared by this resource and its children
            path: Absolute path on the site
            params: Default query params
            headers: Default headers
            format: Optional Format (codec + MIME negotiation)
        """
        self._connection = connection
        self._path = path
        self._params: Dict[str, Any] = dict(params or {})
        self._headers: Dict[str, str] = dict(headers or {})
        self._format = format

    @classmethod
    def from_url(
        cls,
        url: str,
        *,
        format: Optional[Any] = None,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        connection: Optional[Connection] = None,
        connection_factory: ConnectionFactory = DEFAULT_CONNECTION_FACTORY,
    ) -> 'Resource':
        """
        Root resource for a URL.

        The connection comes from `connection` or, if absent, from
        `connection_factory(url)`. The URL's path roots the resource and its
        query string seeds the params.
        """
        if connection is None:
            connection = connection_factory(url)
        return cls(
            connection,
            connection.site_path,
            merge_maps(connection.site_params, params),
            headers,
            format,
        )

    # ==================== Properties ====================

    @property
    def connection(self) -> Connection:
        return self._connection

    @property
    def path(self) -> str:
        return self._path

    @property
    def params(self) -> Dict[str, Any]:
        """Copy of the default params."""
        return dict(self._params)

    @property
    def headers(self) -> Dict[str, str]:
        """Copy of the default headers."""
        return dict(self._headers)

    @property
    def format(self):
        return self._format

    @property
    def site(self) -> str:
        return self._connection.site

    @property
    def url(self) -> str:
        return self._connection.site + (self._path or "/")

    @property
    def user_agent(self) -> Optional[str]:
        for key, value in self._headers.items():
            if key.lower() == 'user-agent':
                return value
        return self._connection.config.user_agent

    # ==================== Merge algebra ====================

    def descend(
        self,
        path: str = "",
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> 'Resource':
        """
        Derive a child resource.

        The path is resolved as a relative reference against this resource's
        path treated as a directory. Params and headers merge right-biased:
        existing keys keep their position, new keys follow in caller order.

        Examples:
            >>> api["users"].path
            '/users'
            >>> api["users"]["7"].path == api["users/7"].path
            True
        """
        path = path or ""
        path, query = split_path_query(str(path))
        return type(self)(
            self._connection,
            join_path(self._path, path) if path else self._path,
            merge_maps(merge_maps(self._params, query), params),
            merge_maps(self._headers, headers),
            self._format,
        )

    def __getitem__(self, path: str) -> 'Resource':
        return self.descend(path)

    def with_params(self, params: Mapping[str, Any]) -> 'Resource':
        return self.descend("", params)

    def with_headers(self, headers: Mapping[str, str]) -> 'Resource':
        return self.descend("", None, headers)

    def with_format(self, format: Any) -> 'Resource':
        return type(self)(self._connection, self._path, self._params, self._headers, format)

    def with_user_agent(self, user_agent: str) -> 'Resource':
        return self.with_headers({'User-Agent': user_agent})

    # ==================== Verbs ====================

    def get(self, params=None, headers=None, *, timeout=None, on_complete: Optional[ResultCallback] = None):
        """Execute a GET request. Used to get (find) resources."""
        return self._perform("GET", params, headers, None, timeout, on_complete)

    def head(self, params=None, headers=None, *, timeout=None, on_complete: Optional[ResultCallback] = None):
        """Execute a HEAD request. Used to obtain meta-information (existence, size)."""
        return self._perform("HEAD", params, headers, None, timeout, on_complete)

    def delete(self, params=None, headers=None, *, timeout=None, on_complete: Optional[ResultCallback] = None):
        """Execute a DELETE request. Used to delete resources."""
        return self._perform("DELETE", params, headers, None, timeout, on_complete)

    def post(self, params=None, data=None, headers=None, *, timeout=None, on_complete: Optional[ResultCallback] = None):
        """
        Execute a POST request. Used to create new resources.

        Without `data` the params are sent as a urlencoded form body.
        """
        return self._perform("POST", params, headers, data, timeout, on_complete)

    def put(self, params=None, data=None, headers=None, *, timeout=None, on_complete: Optional[ResultCallback] = None):
        """
        Execute a PUT request. Used to update resources.

        Without `data` the params are sent as a urlencoded form body.
        """
        return self._perform("PUT", params, headers, data, timeout, on_complete)

    def run(self) -> None:
        """Drain the connection's queue (queued connections only)."""
        self._connection.run()

    # ==================== Internals ====================

    def _perform(self, method, params, headers, data, timeout, on_complete):
        path, params, headers, body = self._prepare(method, params, headers, data)

        if on_complete is None:
            classified = self._connection.execute(method, path, params, headers, body, timeout)
            return self._build_result(classified)

        pending = PendingRequest(self._connection, self._guard(on_complete))

        def handle(classified: Optional[ClassifiedResponse], error: Optional[Exception]) -> None:
            if error is not None:
                pending._resolve(Result(exception=error))
            else:
                pending._resolve(self._build_result(classified))

        self._connection.execute_async(
            method, path, handle,
            params=params, headers=headers, body=body, timeout=timeout,
        )
        return pending

    def _prepare(self, method, params, headers, data):
        params = merge_maps(self._params, params)
        headers = merge_maps(self._headers, headers)

        if self._format is not None:
            prepared = self._format.prepare_request(method, self._path, params, headers, data)
            return prepared.path, prepared.params, prepared.headers, prepared.body

        if isinstance(data, str):
            data = data.encode("utf-8")
        return self._path, params, headers, data

    def _build_result(self, classified: ClassifiedResponse) -> Result:
        if self._format is None or not classified.ok:
            value = classified.body if self._format is None and classified.ok else None
            return Result(value, classified)

        try:
            value = self._format.interpret_response(classified)
        except Exception as e:
            error = InvalidResponseError(
                f"Failed to decode response body ({type(e).__name__}: {e})",
                response=classified,
            )
            error.__cause__ = e
            return Result(None, classified, error)
        return Result(value, classified)

    @staticmethod
    def _guard(on_complete: ResultCallback) -> ResultCallback:
        def call(result: Result) -> None:
            try:
                on_complete(result)
            except Exception:
                logger.exception("error in callback")
        return call

    def __repr__(self) -> str:
        return f"<Resource {self.url}>"

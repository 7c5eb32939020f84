"""
Utility functions for the REST client.

Includes:
- Query string and form body encoding
- Relative path resolution for resource descent
- Site URL parsing
- URL/header sanitization for safe logging
"""

from typing import Any, Dict, Mapping, Optional, Set, Tuple
from urllib.parse import (
    parse_qsl,
    quote_plus,
    urljoin,
    urlsplit,
    urlunsplit,
)

from .exceptions import ConfigurationError


# Default sensitive parameter names that should be masked in logs
DEFAULT_SENSITIVE_PARAMS = {
    'api_key',
    'apikey',
    'api-key',
    'token',
    'access_token',
    'refresh_token',
    'secret',
    'password',
    'passwd',
    'auth',
    'client_secret',
    'session_id',
}

SENSITIVE_HEADERS = {
    'authorization',
    'proxy-authorization',
    'x-api-key',
    'x-auth-token',
    'cookie',
    'set-cookie',
}

# Path resolution needs an absolute base; the authority never leaks out
_JOIN_BASE = "http://resource.invalid"


def build_query(params: Optional[Mapping[str, Any]]) -> str:
    """
    Encode params as `key=value` pairs joined with `&`.

    A None value is emitted as the bare key.

    Examples:
        >>> build_query({"id": "7", "q": "a b"})
        'id=7&q=a+b'
        >>> build_query({"flag": None, "page": 2})
        'flag&page=2'
    """
    if not params:
        return ""

    pairs = []
    for key, value in params.items():
        pair = quote_plus(str(key))
        if value is not None:
            pair += "=" + quote_plus(str(value))
        pairs.append(pair)
    return "&".join(pairs)


def merge_maps(base: Optional[Mapping[str, Any]], override: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Right-biased merge into a new dict.

    Keys of `base` keep their original position (overridden values included),
    new keys from `override` follow in their own order. Neither input is
    mutated.

    Example:
        >>> merge_maps({"a": 1, "b": 2}, {"c": 3, "a": 9})
        {'a': 9, 'b': 2, 'c': 3}
    """
    result = dict(base) if base else {}
    if override:
        result.update(override)
    return result


def split_path_query(path: str) -> Tuple[str, Dict[str, str]]:
    """
    Split an optional query string off a relative path.

    Example:
        >>> split_path_query("users?active=1")
        ('users', {'active': '1'})
    """
    if "?" not in path:
        return path, {}
    path, _, query = path.partition("?")
    return path, dict(parse_qsl(query, keep_blank_values=True))


def join_path(base_path: str, path: str) -> str:
    """
    Resolve `path` against `base_path` treated as a directory.

    Standard relative reference resolution: `.` and `..` collapse,
    an absolute path replaces the base.

    Examples:
        >>> join_path("/a/b", "c")
        '/a/b/c'
        >>> join_path("/a/b/", "c")
        '/a/b/c'
        >>> join_path("/a/b", "../c")
        '/a/c'
        >>> join_path("", "users")
        '/users'
    """
    if not path:
        return base_path

    directory = base_path if base_path.endswith("/") else base_path + "/"
    if not directory.startswith("/"):
        directory = "/" + directory
    return urlsplit(urljoin(_JOIN_BASE + directory, path)).path


def split_site(site: str) -> Tuple[str, str, Dict[str, str]]:
    """
    Split a site URL into (root, path, query params).

    The root is `scheme://host[:port]` without credentials.

    Raises:
        ConfigurationError: If the URL is not an absolute http(s) URL

    Example:
        >>> split_site("https://u:p@api.example.com:8443/v1?x=1")
        ('https://api.example.com:8443', '/v1', {'x': '1'})
    """
    if not site:
        raise ConfigurationError("Missing site URI")

    parts = urlsplit(site)
    if parts.scheme not in ("http", "https"):
        raise ConfigurationError(f"Unsupported site scheme: {parts.scheme!r} ({site})")
    if not parts.hostname:
        raise ConfigurationError(f"Site URI has no host: {site}")

    netloc = parts.hostname
    if ":" in netloc:
        netloc = f"[{netloc}]"
    if parts.port is not None:
        netloc += f":{parts.port}"

    root = urlunsplit((parts.scheme, netloc, "", "", ""))
    query = dict(parse_qsl(parts.query, keep_blank_values=True))
    return root, parts.path, query


def site_key(site: str) -> Tuple[str, str, int]:
    """
    Cache key for transport-level connections: (scheme, host, port).

    Example:
        >>> site_key("https://api.example.com")
        ('https', 'api.example.com', 443)
    """
    parts = urlsplit(site)
    port = parts.port or (443 if parts.scheme == "https" else 80)
    return parts.scheme, parts.hostname or "", port


def sanitize_url(
    url: str,
    extra_params: Optional[Set[str]] = None,
    mask: str = 'REDACTED'
) -> str:
    """
    Mask sensitive query parameters in URL for safe logging.

    Examples:
        >>> sanitize_url('https://api.example.com/data?api_key=secret123')
        'https://api.example.com/data?api_key=REDACTED'
    """
    if not url:
        return url

    sensitive_params = DEFAULT_SENSITIVE_PARAMS | (
        {p.lower() for p in extra_params} if extra_params else set()
    )

    parts = urlsplit(url)
    if not parts.query:
        return url

    pairs = []
    for chunk in parts.query.split("&"):
        name, sep, _ = chunk.partition("=")
        if sep and name.lower() in sensitive_params:
            pairs.append(f"{name}={mask}")
        else:
            pairs.append(chunk)

    return urlunsplit(parts._replace(query="&".join(pairs)))


def sanitize_headers(headers: Optional[Mapping[str, Any]], mask: str = 'REDACTED') -> Optional[Dict[str, Any]]:
    """
    Mask sensitive headers for safe logging.

    Examples:
        >>> sanitize_headers({'Authorization': 'Basic abc', 'Accept': 'application/json'})
        {'Authorization': 'REDACTED', 'Accept': 'application/json'}
    """
    if headers is None:
        return None

    return {
        key: (mask if key.lower() in SENSITIVE_HEADERS else value)
        for key, value in headers.items()
    }

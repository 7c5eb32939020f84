"""Credentials used to build the Authorization header."""

import base64
from dataclasses import dataclass
from typing import Optional, Union
from urllib.parse import unquote, urlsplit


@dataclass(frozen=True)
class BasicCredentials:
    """
    HTTP Basic credentials.

    Either half may be missing; it is rendered as an empty string.

    Example:
        >>> BasicCredentials("user", "secret").authorization()
        'Basic dXNlcjpzZWNyZXQ='
    """
    user: Optional[str] = None
    password: Optional[str] = None

    def authorization(self) -> str:
        raw = f"{self.user or ''}:{self.password or ''}".encode("utf-8")
        token = base64.b64encode(raw).decode("ascii")
        return "Basic " + token.replace("\r", "").replace("\n", "")

    def __repr__(self) -> str:
        return f"BasicCredentials(user={self.user!r}, password='***')"


@dataclass(frozen=True)
class BearerCredentials:
    """Bearer token credentials."""
    token: str

    def authorization(self) -> str:
        return f"Bearer {self.token}"

    def __repr__(self) -> str:
        return "BearerCredentials(token='***')"


Credentials = Optional[Union[BasicCredentials, BearerCredentials]]


def credentials_from_site(site: str) -> Credentials:
    """
    Extract user/password embedded in a site URL.

    Returns:
        BasicCredentials, or None if the URL carries neither part
    """
    parts = urlsplit(site)
    user = unquote(parts.username) if parts.username is not None else None
    password = unquote(parts.password) if parts.password is not None else None
    if user is None and password is None:
        return None
    return BasicCredentials(user, password)

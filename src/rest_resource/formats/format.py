# src/rest_resource/formats/format.py
"""
Formats: a Codec plus MIME negotiation and an optional path suffix.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..core.models import ClassifiedResponse
from .codecs import Codec, ElementTreeCodec, JSONCodec


@dataclass
class PreparedRequest:
    """What a Format hands back to Resource: path, params, headers, body."""

    path: str
    params: Dict[str, Any] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None


class Format:
    """
    Pairs a Codec with a MIME type.

    `prepare_request` sets Accept (and Content-Type plus the encoded body
    when data is supplied). `interpret_response` decodes non-empty bodies.

    Example:
        >>> fmt = Format("application/json", JSONCodec())
        >>> prepared = fmt.prepare_request("POST", "/users", {}, {}, {"name": "a"})
        >>> prepared.headers["Content-Type"], prepared.body
        ('application/json', b'{"name":"a"}')
    """

    def __init__(self, mime: Optional[str], codec: Codec):
        self.codec = codec
        self.mime = mime or getattr(codec, "mime", None)

    def rewrite_path(self, path: str) -> str:
        return path

    def prepare_request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any],
        headers: Dict[str, str],
        data: Any = None,
    ) -> PreparedRequest:
        headers = dict(headers)
        if self.mime:
            headers['Accept'] = self.mime

        body = None
        if data is not None:
            body = self.codec.encode(data)
            if self.mime:
                headers['Content-Type'] = self.mime

        return PreparedRequest(
            path=self.rewrite_path(path),
            params=dict(params),
            headers=headers,
            body=body,
        )

    def interpret_response(self, response: ClassifiedResponse) -> Any:
        """
        Decode the response body.

        Returns None for an absent or empty body. Codec errors propagate.
        """
        if not response.body:
            return None
        return self.codec.decode(response.body)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mime={self.mime!r}, codec={type(self.codec).__name__})"


class SuffixFormat(Format):
    """
    Format that also appends a fixed suffix to the request path.

    Example:
        >>> SuffixFormat("application/json", ".json", JSONCodec()).rewrite_path("/users/7")
        '/users/7.json'
    """

    def __init__(self, mime: Optional[str], suffix: Optional[str], codec: Codec):
        super().__init__(mime, codec)
        self.suffix = suffix

    def rewrite_path(self, path: str) -> str:
        if not self.suffix:
            return path
        return (path or "/") + self.suffix


def json_format(mime: str = "application/json", codec: Optional[Codec] = None) -> Format:
    return Format(mime, codec or JSONCodec())


def xml_format(mime: str = "application/xml", codec: Optional[Codec] = None) -> Format:
    return Format(mime, codec or ElementTreeCodec())


def json_suffix_format(
    suffix: str = ".json",
    mime: str = "application/json",
    codec: Optional[Codec] = None,
) -> SuffixFormat:
    return SuffixFormat(mime, suffix, codec or JSONCodec())


def xml_suffix_format(
    suffix: str = ".xml",
    mime: str = "application/xml",
    codec: Optional[Codec] = None,
) -> SuffixFormat:
    return SuffixFormat(mime, suffix, codec or ElementTreeCodec())

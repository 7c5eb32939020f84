"""Body codecs: one MIME type each."""

import json
import xml.etree.ElementTree as ET
from typing import Any, Optional, Protocol


class Codec(Protocol):
    """
    Encodes request bodies and decodes response bodies.

    `mime` is optional; Format falls back to it when no MIME type is given.
    """

    def encode(self, value: Any) -> bytes: ...

    def decode(self, data: bytes) -> Any: ...


class JSONCodec:
    """
    JSON codec.

    Example:
        >>> JSONCodec().encode({"name": "a"})
        b'{"name":"a"}'
        >>> JSONCodec().decode(b'{"name":"a"}')
        {'name': 'a'}
    """

    mime = "application/json"

    def __init__(self, encoding: str = "utf-8", **dumps_kwargs: Any):
        self.encoding = encoding
        self._dumps_kwargs = {"separators": (",", ":"), "ensure_ascii": False}
        self._dumps_kwargs.update(dumps_kwargs)

    def encode(self, value: Any) -> bytes:
        return json.dumps(value, **self._dumps_kwargs).encode(self.encoding)

    def decode(self, data: bytes) -> Any:
        if isinstance(data, bytes):
            data = data.decode(self.encoding)
        return json.loads(data)


class ElementTreeCodec:
    """
    XML codec working on ElementTree elements.

    Example:
        >>> root = ElementTreeCodec().decode(b"<user><name>a</name></user>")
        >>> root.findtext("name")
        'a'
    """

    mime = "application/xml"

    def __init__(self, encoding: str = "utf-8", root_tag: Optional[str] = None):
        self.encoding = encoding
        self.root_tag = root_tag

    def encode(self, value: Any) -> bytes:
        if isinstance(value, dict):
            value = self._from_dict(value)
        if not isinstance(value, ET.Element):
            raise TypeError(f"Cannot encode {type(value).__name__} as XML")
        return ET.tostring(value, encoding=self.encoding)

    def decode(self, data: bytes) -> ET.Element:
        return ET.fromstring(data)

    def _from_dict(self, value: dict) -> ET.Element:
        if self.root_tag is None:
            if len(value) != 1:
                raise TypeError("dict without root_tag must have exactly one key")
            tag, body = next(iter(value.items()))
        else:
            tag, body = self.root_tag, value
        root = ET.Element(tag)
        self._fill(root, body)
        return root

    def _fill(self, element: ET.Element, body: Any) -> None:
        if isinstance(body, dict):
            for key, child_value in body.items():
                self._fill(ET.SubElement(element, key), child_value)
        elif body is not None:
            element.text = str(body)

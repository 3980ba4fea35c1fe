"""
Declarative decoding of Flickr XML responses into dataclasses.

Schema classes are frozen dataclasses whose fields are declared with
`attr`, `text`, `nested` or `many`. Each helper records where the value
lives in the XML element and how to convert it:

    @dataclass(frozen=True)
    class Photo:
        id: str = attr("id")
        views: int = attr("views", parse_int)
        title: str = text("title")

`decode(Photo, element)` then builds a `Photo` from an ElementTree element.
Values absent from the XML keep the field default.
"""
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Optional

from ..errors import DecodeError, FlickrAPIError
from .decoders import parse_bool, parse_int

XML_BINDING = "xml_binding"

_ZERO = {str: "", parse_int: 0, parse_bool: False}

MISSING = object()


class Binding:
    """Where a field's value lives in an element and how to convert it."""

    def __init__(self, kind, name, convert):
        self.kind = kind
        self.name = name
        self.convert = convert

    def read(self, element):
        """Return the converted value, or MISSING when the XML does not carry it."""
        if self.kind == "attr":
            raw = element.get(self.name)
            return MISSING if raw is None else self.convert(raw)

        if self.kind == "many":
            return [self._convert_element(child) for child in element.findall(self.name)]

        child = element.find(self.name)
        if child is None:
            return MISSING
        if self.kind == "text":
            return self.convert(child.text or "")
        return self._convert_element(child)

    def _convert_element(self, child):
        if is_dataclass(self.convert):
            return decode(self.convert, child)
        return self.convert(child)


def _bound(kind, name, convert, default):
    metadata = {XML_BINDING: Binding(kind, name, convert)}
    if default is list:
        return field(default_factory=list, metadata=metadata)
    return field(default=default, metadata=metadata)


def attr(name, convert=str):
    """An XML attribute of the element."""
    return _bound("attr", name, convert, _ZERO.get(convert))


def text(name, convert=str):
    """The text of a direct child element."""
    return _bound("text", name, convert, _ZERO.get(convert))


def nested(name, convert):
    """A direct child element decoded by a schema class or an element decoder."""
    return _bound("nested", name, convert, None)


def many(name, convert):
    """Every direct child element with this tag, in document order."""
    return _bound("many", name, convert, list)


def decode(cls, element):
    """Build an instance of the schema class `cls` from `element`."""
    values = {}
    for f in fields(cls):
        binding = f.metadata.get(XML_BINDING)
        if binding is None:
            continue
        try:
            value = binding.read(element)
        except DecodeError as e:
            raise DecodeError(f"{cls.__name__}.{f.name}: {e}") from e
        if value is not MISSING:
            values[f.name] = value
    return cls(**values)


@dataclass(frozen=True)
class ResponseError:
    """<err code="..." msg="..."/> carried by failed responses."""
    code: int = attr("code", parse_int)
    message: str = attr("msg")


@dataclass(frozen=True)
class BasicResponse:
    """The <rsp> envelope every Flickr REST response is wrapped in."""
    stat: str = attr("stat")
    error: Optional[ResponseError] = nested("err", ResponseError)

    @property
    def ok(self):
        return self.stat == "ok"

    def ensure_ok(self):
        """Raise FlickrAPIError unless Flickr reported success; return self."""
        if self.ok:
            return self
        if self.error is not None:
            raise FlickrAPIError(self.error.code, self.error.message)
        raise FlickrAPIError(0, f"unexpected response status {self.stat!r}")


def decode_response(response_type, body):
    """Parse a response body (bytes or str) into `response_type`."""
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise DecodeError(f"malformed XML: {e}") from e
    if root.tag != "rsp":
        raise DecodeError(f"expected <rsp> root element, got <{root.tag}>")
    return decode(response_type, root)

"""
Field decoders for values Flickr encodes in its own formats.
"""
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..errors import DecodeError

FLICKR_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_TRUE = ('1', 't', 'true')
_FALSE = ('0', 'f', 'false')


def parse_int(value):
    """Decode an integer attribute; an empty value is 0."""
    value = value.strip()
    if not value:
        return 0
    try:
        return int(value)
    except ValueError:
        raise DecodeError(f"invalid integer {value!r}") from None


def parse_bool(value):
    """Decode a boolean attribute ("1"/"0", "true"/"false"); an empty value is False."""
    value = value.strip().lower()
    if not value:
        return False
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise DecodeError(f"invalid boolean {value!r}")


def parse_flickr_time(value):
    """Parse a "YYYY-MM-DD HH:MM:SS" timestamp as a UTC datetime."""
    try:
        parsed = datetime.strptime(value.strip(), FLICKR_TIME_FORMAT)
    except ValueError as e:
        raise DecodeError(f"invalid time {value!r}: {e}") from e
    return parsed.replace(tzinfo=timezone.utc)


def parse_timezone(identifier):
    """Resolve an IANA timezone identifier; the empty identifier is UTC."""
    identifier = identifier.strip()
    if not identifier:
        identifier = "UTC"
    try:
        return ZoneInfo(identifier)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise DecodeError(f"unknown time zone {identifier!r}") from e


def flickr_time_element(element):
    """Decode a timestamp carried as element text; an empty element is None."""
    text = (element.text or "").strip()
    if not text:
        return None
    return parse_flickr_time(text)


def timezone_element(element):
    """Decode <timezone timezone_id="..."/> into a ZoneInfo."""
    return parse_timezone(element.get("timezone_id", ""))

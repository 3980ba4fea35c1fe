"""
Exceptions raised by the Flickr bindings.
Each class names the stage of a call that failed.
"""


class FlickrTypedError(Exception):
    """Base class for every error raised by this package."""


class RequestBuildError(FlickrTypedError):
    """The request could not be constructed or signed."""


class TransportError(FlickrTypedError):
    """The request could not be executed (network failure, timeout, non-2xx status)."""


class DecodeError(FlickrTypedError):
    """The response body does not match the expected schema."""


class FlickrAPIError(FlickrTypedError):
    """Flickr answered with stat="fail"."""

    def __init__(self, code, message):
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self):
        return f"[err {self.code}] {self.message}"

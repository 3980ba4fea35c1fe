"""
Request values and builders for the Flickr REST API.
A FlickrRequest is built fresh for every call and never mutated afterwards.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping

import httpx

from ..config import config
from ..errors import RequestBuildError
from .signing import Signer

log = logging.getLogger(__name__)


class HTTPVerb(str, Enum):
    GET = "GET"
    POST = "POST"


class Signing(Enum):
    API_KEY = "api_key"  # anonymous access, application key only
    OAUTH = "oauth"      # user access token


@dataclass(frozen=True)
class FlickrRequest:
    """A Flickr method call: method name, parameters, verb and signing mode."""
    method: str
    params: Mapping[str, str] = field(default_factory=dict)
    verb: HTTPVerb = HTTPVerb.GET
    signing: Signing = Signing.API_KEY

    def __post_init__(self):
        object.__setattr__(self, 'params', MappingProxyType(dict(self.params)))

    @classmethod
    def read(cls, method, params, authenticate=False):
        """A read-only call; signed with the user token only when asked to."""
        signing = Signing.OAUTH if authenticate else Signing.API_KEY
        return cls(method, params, HTTPVerb.GET, signing)

    @classmethod
    def write(cls, method, params):
        """A mutating call; always POST and always signed with the user token."""
        return cls(method, params, HTTPVerb.POST, Signing.OAUTH)

    def wire_params(self):
        """Parameters as sent to Flickr, before signing."""
        wire = dict(self.params)
        wire['method'] = self.method
        wire['format'] = 'rest'
        return wire


def set_optional(params, key, value):
    """Set `key` unless `value` is its "unspecified" default.

    Empty strings, zero, NOT_SPECIFIED enum members and empty sequences are
    omitted. Enums are sent as their integer value, sequences comma-joined.
    """
    if isinstance(value, IntEnum):
        if value != 0:
            params[key] = str(int(value))
    elif isinstance(value, str):
        if value:
            params[key] = value
    elif isinstance(value, int):
        if value != 0:
            params[key] = str(value)
    elif value:
        params[key] = join_ids(value)
    return params


def set_page(params, page):
    # if not provided, flickr defaults this argument to 1
    if page > 1:
        params['page'] = str(page)
    return params


def join_ids(ids):
    """Comma-join a sequence of ids; a plain string is passed through."""
    if isinstance(ids, str):
        return ids
    return ",".join(str(i) for i in ids)


class FlickrRequestBuilder:
    """Builds signed httpx requests for the context-aware clients.

    Requests are signed with the user token when the credentials carry one,
    with the application key otherwise.
    """

    def __init__(self, credentials, rest_url=None):
        self.credentials = credentials
        self.signer = Signer(credentials)
        self.rest_url = rest_url or config.REST_URL

    def new_request(self, verb, method, params, timeout=None):
        try:
            verb = HTTPVerb(verb)
        except ValueError:
            raise RequestBuildError(f"unsupported HTTP verb {verb!r}") from None
        wire = FlickrRequest(method, params, verb).wire_params()

        if self.credentials.has_user_token:
            signed = self.signer.oauth_sign(verb.value, self.rest_url, wire)
        else:
            signed = self.signer.api_sign(wire)

        extensions = {}
        if timeout is not None:
            extensions['timeout'] = httpx.Timeout(timeout).as_dict()

        log.debug("Building %s request for %s", verb.value, method)
        try:
            if verb is HTTPVerb.GET:
                return httpx.Request(verb.value, self.rest_url, params=signed, extensions=extensions)
            return httpx.Request(verb.value, self.rest_url, data=signed, extensions=extensions)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise RequestBuildError(f"new request {method}: {e}") from e
